# direcional/modules/clients/service.py
from typing import Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .repository import ClientsRepository
from .schemas import (
    ClientCreateRequest, ClientUpdateRequest, ClientResponse, ClientListResponse
)
from direcional.core.exceptions import NotFoundError, ConflictError
from direcional.shared.enums import ClientStatus

logger = logging.getLogger(__name__)


class ClientsService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = ClientsRepository(db)

    def list_clients(self, status: Optional[ClientStatus] = None) -> ClientListResponse:
        clients = self.repository.get_all(status.value if status else None)
        return ClientListResponse(
            clients=[ClientResponse.model_validate(c) for c in clients],
            count=len(clients)
        )

    def get_client(self, client_id: int) -> ClientResponse:
        return ClientResponse.model_validate(self._get_or_404(client_id))

    def create_client(self, client_data: ClientCreateRequest) -> ClientResponse:
        """Cadastrar cliente; CPF é único"""
        if self.repository.get_by_cpf(client_data.cpf):
            raise ConflictError(
                "CPF já cadastrado no sistema",
                details={"cpf": client_data.cpf}
            )

        data = client_data.model_dump()
        data["status"] = client_data.status.value

        try:
            client = self.repository.create(data)
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("CPF já cadastrado no sistema", details={"cpf": client_data.cpf})

        logger.info(f"Cliente {client.id} cadastrado")
        return ClientResponse.model_validate(client)

    def update_client(self, client_id: int, update_data: ClientUpdateRequest) -> ClientResponse:
        client = self._get_or_404(client_id)

        changes = update_data.model_dump(exclude={"status"})
        if update_data.status is not None:
            changes["status"] = update_data.status.value

        client = self.repository.update(client, changes)
        logger.info(f"Cliente {client_id} atualizado")
        return ClientResponse.model_validate(client)

    def delete_client(self, client_id: int) -> None:
        """Excluir cliente sem vendas vinculadas"""
        client = self._get_or_404(client_id)

        sales_count = self.repository.count_sales(client_id)
        if sales_count:
            raise ConflictError(
                f"Cliente {client_id} possui {sales_count} venda(s) e não pode ser excluído",
                details={"client_id": client_id, "sales": sales_count}
            )

        self.repository.delete(client)
        logger.info(f"Cliente {client_id} excluído")

    def _get_or_404(self, client_id: int):
        client = self.repository.get_by_id(client_id)
        if not client:
            raise NotFoundError(f"Cliente com ID {client_id} não encontrado")
        return client
