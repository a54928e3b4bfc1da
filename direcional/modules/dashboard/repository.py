# direcional/modules/dashboard/repository.py
from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import Dict, Any
from decimal import Decimal

from direcional.shared.database.models import Client, Apartment, Sale
from direcional.shared.enums import SaleStatus, ACTIVE_SALE_STATUSES

class DashboardRepository:
    def __init__(self, db: Session):
        self.db = db

    def count_clients_by_status(self) -> Dict[str, int]:
        rows = self.db.query(Client.status, func.count(Client.id)).group_by(Client.status).all()
        return {status: count for status, count in rows}

    def count_apartments_by_status(self) -> Dict[str, int]:
        rows = self.db.query(Apartment.status, func.count(Apartment.id)).group_by(Apartment.status).all()
        return {status: count for status, count in rows}

    def sales_by_status(self) -> Dict[str, Dict[str, Any]]:
        """Quantidade e valor somado por status (aggregate query)"""
        rows = self.db.query(
            Sale.status,
            func.count(Sale.id).label('count'),
            func.coalesce(func.sum(Sale.price), 0).label('amount')
        ).group_by(Sale.status).all()

        return {
            row.status: {"count": row.count, "amount": Decimal(str(row.amount))}
            for row in rows
        }

    def confirmed_amount(self) -> Decimal:
        total = self.db.query(func.coalesce(func.sum(Sale.price), 0)).filter(
            Sale.status == SaleStatus.CONFIRMED.value
        ).scalar()
        return Decimal(str(total))

    def active_amount(self) -> Decimal:
        total = self.db.query(func.coalesce(func.sum(Sale.price), 0)).filter(
            Sale.status.in_([s.value for s in ACTIVE_SALE_STATUSES])
        ).scalar()
        return Decimal(str(total))
