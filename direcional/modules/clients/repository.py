# direcional/modules/clients/repository.py
from sqlalchemy.orm import Session
from typing import Dict, Any, List, Optional

from direcional.shared.database.models import Client, Sale

class ClientsRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self, status: Optional[str] = None) -> List[Client]:
        query = self.db.query(Client)
        if status:
            query = query.filter(Client.status == status)
        return query.order_by(Client.name).all()

    def get_by_id(self, client_id: int) -> Optional[Client]:
        return self.db.query(Client).filter(Client.id == client_id).first()

    def get_by_cpf(self, cpf: str) -> Optional[Client]:
        return self.db.query(Client).filter(Client.cpf == cpf).first()

    def create(self, client_data: Dict[str, Any]) -> Client:
        client = Client(**client_data)
        self.db.add(client)
        self.db.commit()
        self.db.refresh(client)
        return client

    def update(self, client: Client, changes: Dict[str, Any]) -> Client:
        for field, value in changes.items():
            setattr(client, field, value)
        self.db.commit()
        self.db.refresh(client)
        return client

    def delete(self, client: Client) -> None:
        self.db.delete(client)
        self.db.commit()

    def count_sales(self, client_id: int) -> int:
        return self.db.query(Sale).filter(Sale.client_id == client_id).count()
