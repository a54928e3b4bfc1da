# direcional/modules/sales/service.py
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from .repository import SalesRepository
from .schemas import SaleCreateRequest, SaleUpdateRequest, SaleResponse, SaleListResponse
from .transitions import can_transition, is_terminal, apartment_status_for
from direcional.core.exceptions import (
    DirecionalError, NotFoundError, ConflictError, BusinessValidationError
)
from direcional.shared.database.models import Sale, Client, Apartment
from direcional.shared.enums import ApartmentStatus, SaleStatus, ACTIVE_SALE_STATUSES

logger = logging.getLogger(__name__)


class SalesService:
    """
    Ciclo de vida da venda.

    Cada operação que altera venda e apartamento roda em uma única transação
    da sessão recebida. O apartamento é lido com SELECT FOR UPDATE e tem coluna
    de versão; o escritor que perde a corrida recebe ConflictError.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = SalesRepository(db)

    @contextmanager
    def _transaction(self, action: str):
        try:
            yield
            self.db.commit()
        except DirecionalError as e:
            self.db.rollback()
            logger.warning(f"{action} rejeitada: {e.message}")
            raise
        except (StaleDataError, IntegrityError) as e:
            self.db.rollback()
            logger.warning(f"Conflito de concorrência em {action}: {e}")
            raise ConflictError(
                "O apartamento foi alterado por outra operação. Tente novamente.",
                details={"action": action}
            )
        except Exception:
            logger.exception(f"Erro inesperado em {action}")
            self.db.rollback()
            raise

    # ------------------------------------------------------------------
    # Ciclo de vida
    # ------------------------------------------------------------------

    def create_sale(self, sale_data: SaleCreateRequest) -> SaleResponse:
        """
        Registrar venda.

        - Cliente e apartamento precisam existir (NotFoundError)
        - Apartamento precisa estar Disponível (ConflictError)
        - Venda nasce Pendente (ou Em Análise) e o apartamento passa a Reservado
        """
        logger.info(
            f"Iniciando venda - Cliente: {sale_data.client_id}, Apartamento: {sale_data.apartment_id}"
        )

        with self._transaction("create_sale"):
            client = self.repository.get_client(sale_data.client_id)
            if not client:
                raise NotFoundError(f"Cliente com ID {sale_data.client_id} não encontrado")

            apartment = self.repository.get_apartment_for_update(sale_data.apartment_id)
            if not apartment:
                raise NotFoundError(f"Apartamento com ID {sale_data.apartment_id} não encontrado")

            if apartment.status != ApartmentStatus.AVAILABLE.value:
                raise ConflictError(
                    f"Apartamento {apartment.label} não está disponível para venda",
                    details={"apartment_id": apartment.id, "apartment_status": apartment.status}
                )

            initial_status = SaleStatus.UNDER_REVIEW if sale_data.requires_review else SaleStatus.PENDING
            terms = sale_data.model_dump(exclude={"client_id", "apartment_id", "requires_review"})
            price = terms.pop("price") or apartment.price
            self._check_down_payment(price, terms.get("down_payment"))

            sale = self.repository.add_sale({
                **terms,
                "client_id": client.id,
                "apartment_id": apartment.id,
                "price": price,
                "status": initial_status.value,
            })

            apartment.status = apartment_status_for(initial_status).value

        logger.info(
            f"Venda {sale.id} registrada ({initial_status.value}) - apartamento {apartment.id} Reservado"
        )
        return self._build_response(sale, client, apartment)

    def confirm_sale(self, sale_id: int) -> SaleResponse:
        """Pendente/Em Análise -> Confirmada; apartamento -> Vendido"""
        return self._transition(sale_id, SaleStatus.CONFIRMED, "confirm_sale")

    def cancel_sale(self, sale_id: int) -> SaleResponse:
        """Pendente/Em Análise -> Cancelada; apartamento volta a Disponível"""
        return self._transition(sale_id, SaleStatus.CANCELLED, "cancel_sale")

    def delete_sale(self, sale_id: int) -> None:
        """Excluir venda; libera o apartamento se a venda ainda estava ativa"""
        with self._transaction("delete_sale"):
            sale = self.repository.get_sale_for_update(sale_id)
            if not sale:
                raise NotFoundError(f"Venda com ID {sale_id} não encontrada")

            released = None
            if sale.status in [s.value for s in ACTIVE_SALE_STATUSES]:
                released = self.repository.get_apartment_for_update(sale.apartment_id)
                if released:
                    released.status = ApartmentStatus.AVAILABLE.value

            self.repository.delete_sale(sale)

        if released:
            logger.info(f"Venda {sale_id} excluída - apartamento {released.id} liberado")
        else:
            logger.info(f"Venda {sale_id} excluída")

    def update_sale(self, sale_id: int, update_data: SaleUpdateRequest) -> SaleResponse:
        """Atualizar condições de pagamento de uma venda ainda ativa"""
        with self._transaction("update_sale"):
            sale = self.repository.get_sale_for_update(sale_id)
            if not sale:
                raise NotFoundError(f"Venda com ID {sale_id} não encontrada")

            if is_terminal(sale.status):
                raise ConflictError(
                    f"Venda {sale_id} já foi {sale.status.lower()} e não pode ser alterada",
                    details={"sale_id": sale_id, "sale_status": sale.status}
                )

            changes = update_data.model_dump(exclude_unset=True)
            if changes.get("price") is None:
                changes.pop("price", None)

            self._check_down_payment(
                changes.get("price", sale.price),
                changes.get("down_payment", sale.down_payment)
            )
            self._check_installments(
                changes.get("installments", sale.installments),
                changes.get("installment_value", sale.installment_value)
            )

            for field, value in changes.items():
                setattr(sale, field, value)

        logger.info(f"Venda {sale_id} atualizada: {sorted(changes)}")
        return self._build_response(sale)

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------

    def get_sale(self, sale_id: int) -> SaleResponse:
        sale = self.repository.get_sale(sale_id)
        if not sale:
            raise NotFoundError(f"Venda com ID {sale_id} não encontrada")
        return self._build_response(sale)

    def list_sales(self) -> SaleListResponse:
        return self._build_list(self.repository.list_sales())

    def list_by_client(self, client_id: int) -> SaleListResponse:
        return self._build_list(self.repository.list_by_client(client_id))

    def list_by_apartment(self, apartment_id: int) -> SaleListResponse:
        return self._build_list(self.repository.list_by_apartment(apartment_id))

    def list_by_status(self, status: SaleStatus) -> SaleListResponse:
        return self._build_list(self.repository.list_by_status(status.value))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _transition(self, sale_id: int, target: SaleStatus, action: str) -> SaleResponse:
        with self._transaction(action):
            sale = self.repository.get_sale_for_update(sale_id)
            if not sale:
                raise NotFoundError(f"Venda com ID {sale_id} não encontrada")

            current = SaleStatus(sale.status)
            if not can_transition(current, target):
                raise ConflictError(
                    f"Venda {sale_id} já foi confirmada ou cancelada",
                    details={"sale_id": sale_id, "sale_status": current.value, "requested": target.value}
                )

            apartment = self.repository.get_apartment_for_update(sale.apartment_id)

            sale.status = target.value
            if target == SaleStatus.CONFIRMED:
                sale.confirmed_at = datetime.now()
            elif target == SaleStatus.CANCELLED:
                sale.cancelled_at = datetime.now()

            if apartment:
                apartment.status = apartment_status_for(target).value
            else:
                logger.warning(f"Venda {sale_id} referencia apartamento inexistente {sale.apartment_id}")

        logger.info(f"Venda {sale_id}: {current.value} -> {target.value}")
        return self._build_response(sale, apartment=apartment)

    @staticmethod
    def _check_down_payment(price: Optional[Decimal], down_payment: Optional[Decimal]) -> None:
        if price is not None and down_payment is not None and Decimal(down_payment) > Decimal(price):
            raise BusinessValidationError(
                "A entrada não pode ser maior que o valor da venda",
                details={"price": str(price), "down_payment": str(down_payment)}
            )

    @staticmethod
    def _check_installments(installments: Optional[int], installment_value: Optional[Decimal]) -> None:
        if installment_value is not None and not installments:
            raise BusinessValidationError(
                "Informe o número de parcelas junto com o valor da parcela",
                details={"installment_value": str(installment_value)}
            )

    def _build_response(
        self,
        sale: Sale,
        client: Optional[Client] = None,
        apartment: Optional[Apartment] = None
    ) -> SaleResponse:
        """Construir resposta padronizada"""
        client = client or self.repository.get_client(sale.client_id)
        apartment = apartment or self.repository.get_apartment(sale.apartment_id)

        response = SaleResponse.model_validate(sale)
        response.client_name = client.name if client else None
        response.apartment_label = apartment.label if apartment else None
        response.apartment_status = apartment.status if apartment else None
        return response

    def _build_list(self, sales: List[Sale]) -> SaleListResponse:
        clients: Dict[int, Client] = self.repository.get_clients_by_ids({s.client_id for s in sales})
        apartments: Dict[int, Apartment] = self.repository.get_apartments_by_ids({s.apartment_id for s in sales})

        return SaleListResponse(
            sales=[
                self._build_response(s, clients.get(s.client_id), apartments.get(s.apartment_id))
                for s in sales
            ],
            count=len(sales)
        )
