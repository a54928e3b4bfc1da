from sqlalchemy.orm import Session
from typing import Dict, Any, List, Optional
import logging

from direcional.shared.database.models import Sale, Client, Apartment

logger = logging.getLogger(__name__)

class SalesRepository:
    """
    Acesso a dados de vendas.

    Não faz commit: o SalesService decide o limite da transação para que
    venda e apartamento sejam gravados juntos.
    """

    def __init__(self, db: Session):
        self.db = db

    # ---------------- leituras ----------------

    def get_client(self, client_id: int) -> Optional[Client]:
        return self.db.query(Client).filter(Client.id == client_id).first()

    def get_apartment(self, apartment_id: int) -> Optional[Apartment]:
        return self.db.query(Apartment).filter(Apartment.id == apartment_id).first()

    def get_apartment_for_update(self, apartment_id: int) -> Optional[Apartment]:
        """SELECT ... FOR UPDATE: serializa escritores concorrentes no mesmo apartamento"""
        return self.db.query(Apartment).filter(
            Apartment.id == apartment_id
        ).with_for_update().populate_existing().first()

    def get_sale(self, sale_id: int) -> Optional[Sale]:
        return self.db.query(Sale).filter(Sale.id == sale_id).first()

    def get_sale_for_update(self, sale_id: int) -> Optional[Sale]:
        return self.db.query(Sale).filter(Sale.id == sale_id).with_for_update().populate_existing().first()

    def list_sales(self) -> List[Sale]:
        return self.db.query(Sale).order_by(Sale.sale_date.desc(), Sale.id.desc()).all()

    def list_by_client(self, client_id: int) -> List[Sale]:
        return self.db.query(Sale).filter(
            Sale.client_id == client_id
        ).order_by(Sale.sale_date.desc(), Sale.id.desc()).all()

    def list_by_apartment(self, apartment_id: int) -> List[Sale]:
        return self.db.query(Sale).filter(
            Sale.apartment_id == apartment_id
        ).order_by(Sale.sale_date.desc(), Sale.id.desc()).all()

    def list_by_status(self, status: str) -> List[Sale]:
        return self.db.query(Sale).filter(
            Sale.status == status
        ).order_by(Sale.sale_date.desc(), Sale.id.desc()).all()

    def get_clients_by_ids(self, ids) -> Dict[int, Client]:
        if not ids:
            return {}
        return {c.id: c for c in self.db.query(Client).filter(Client.id.in_(ids)).all()}

    def get_apartments_by_ids(self, ids) -> Dict[int, Apartment]:
        if not ids:
            return {}
        return {a.id: a for a in self.db.query(Apartment).filter(Apartment.id.in_(ids)).all()}

    # ---------------- escritas ----------------

    def add_sale(self, sale_data: Dict[str, Any]) -> Sale:
        sale = Sale(**sale_data)
        self.db.add(sale)
        self.db.flush()  # Obter sale.id dentro da transação
        logger.info(f"Venda criada com ID: {sale.id}")
        return sale

    def delete_sale(self, sale: Sale) -> None:
        self.db.delete(sale)
        self.db.flush()
