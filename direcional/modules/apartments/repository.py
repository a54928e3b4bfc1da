# direcional/modules/apartments/repository.py
from sqlalchemy.orm import Session
from typing import Dict, Any, List, Optional

from direcional.shared.database.models import Apartment, Sale
from direcional.shared.enums import SaleStatus

class ApartmentsRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Apartment]:
        return self.db.query(Apartment).order_by(Apartment.block, Apartment.unit_number).all()

    def get_by_status(self, status: str) -> List[Apartment]:
        return self.db.query(Apartment).filter(
            Apartment.status == status
        ).order_by(Apartment.block, Apartment.unit_number).all()

    def get_by_id(self, apartment_id: int) -> Optional[Apartment]:
        return self.db.query(Apartment).filter(Apartment.id == apartment_id).first()

    def get_for_update(self, apartment_id: int) -> Optional[Apartment]:
        return self.db.query(Apartment).filter(
            Apartment.id == apartment_id
        ).with_for_update().populate_existing().first()

    def create(self, apartment_data: Dict[str, Any]) -> Apartment:
        apartment = Apartment(**apartment_data)
        self.db.add(apartment)
        self.db.commit()
        self.db.refresh(apartment)
        return apartment

    def update(self, apartment: Apartment, changes: Dict[str, Any]) -> Apartment:
        for field, value in changes.items():
            setattr(apartment, field, value)
        self.db.commit()
        self.db.refresh(apartment)
        return apartment

    def delete(self, apartment: Apartment) -> None:
        self.db.delete(apartment)
        self.db.commit()

    def count_sales(self, apartment_id: int) -> int:
        return self.db.query(Sale).filter(Sale.apartment_id == apartment_id).count()

    def count_open_sales(self, apartment_id: int) -> int:
        """Vendas que ainda prendem o apartamento (tudo exceto Cancelada)"""
        return self.db.query(Sale).filter(
            Sale.apartment_id == apartment_id,
            Sale.status != SaleStatus.CANCELLED.value
        ).count()
