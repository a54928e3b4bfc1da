# direcional/modules/apartments/service.py
import logging

from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from .repository import ApartmentsRepository
from .schemas import (
    ApartmentCreateRequest, ApartmentUpdateRequest, ApartmentResponse, ApartmentListResponse
)
from direcional.core.exceptions import NotFoundError, ConflictError
from direcional.modules.sales.transitions import MANUAL_APARTMENT_STATUSES
from direcional.shared.enums import ApartmentStatus

logger = logging.getLogger(__name__)


class ApartmentsService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = ApartmentsRepository(db)

    def list_apartments(self) -> ApartmentListResponse:
        return self._build_list(self.repository.get_all())

    def list_by_status(self, status: ApartmentStatus) -> ApartmentListResponse:
        return self._build_list(self.repository.get_by_status(status.value))

    def get_apartment(self, apartment_id: int) -> ApartmentResponse:
        apartment = self.repository.get_by_id(apartment_id)
        if not apartment:
            raise NotFoundError(f"Apartamento com ID {apartment_id} não encontrado")
        return ApartmentResponse.model_validate(apartment)

    def create_apartment(self, apartment_data: ApartmentCreateRequest) -> ApartmentResponse:
        data = apartment_data.model_dump()
        data["status"] = ApartmentStatus.AVAILABLE.value

        apartment = self.repository.create(data)
        logger.info(f"Apartamento {apartment.id} ({apartment.label}) cadastrado")
        return ApartmentResponse.model_validate(apartment)

    def update_apartment(self, apartment_id: int, update_data: ApartmentUpdateRequest) -> ApartmentResponse:
        """
        Atualizar dados do apartamento.

        O status só pode ser alternado manualmente entre Disponível e
        Indisponível, e apenas quando não há venda em andamento.
        """
        apartment = self.repository.get_for_update(apartment_id)
        if not apartment:
            raise NotFoundError(f"Apartamento com ID {apartment_id} não encontrado")

        changes = update_data.model_dump(exclude={"status"})
        target = update_data.status

        if target is not None and target.value != apartment.status:
            if target not in MANUAL_APARTMENT_STATUSES:
                self.db.rollback()
                raise ConflictError(
                    f"Status '{target.value}' é definido apenas pelo fluxo de vendas",
                    details={"apartment_id": apartment_id, "requested": target.value}
                )

            open_sales = self.repository.count_open_sales(apartment_id)
            if open_sales:
                self.db.rollback()
                raise ConflictError(
                    f"Apartamento {apartment.label} possui venda em andamento",
                    details={"apartment_id": apartment_id, "apartment_status": apartment.status}
                )

            changes["status"] = target.value

        try:
            apartment = self.repository.update(apartment, changes)
        except StaleDataError:
            self.db.rollback()
            raise ConflictError("O apartamento foi alterado por outra operação. Tente novamente.")

        logger.info(f"Apartamento {apartment_id} atualizado (status {apartment.status})")
        return ApartmentResponse.model_validate(apartment)

    def delete_apartment(self, apartment_id: int) -> None:
        apartment = self.repository.get_by_id(apartment_id)
        if not apartment:
            raise NotFoundError(f"Apartamento com ID {apartment_id} não encontrado")

        sales_count = self.repository.count_sales(apartment_id)
        if sales_count:
            raise ConflictError(
                f"Apartamento {apartment.label} possui {sales_count} venda(s) e não pode ser excluído",
                details={"apartment_id": apartment_id, "sales": sales_count}
            )

        self.repository.delete(apartment)
        logger.info(f"Apartamento {apartment_id} excluído")

    @staticmethod
    def _build_list(apartments) -> ApartmentListResponse:
        return ApartmentListResponse(
            apartments=[ApartmentResponse.model_validate(a) for a in apartments],
            count=len(apartments)
        )
