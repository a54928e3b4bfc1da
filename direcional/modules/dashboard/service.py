# direcional/modules/dashboard/service.py
from sqlalchemy.orm import Session

from .repository import DashboardRepository
from .schemas import DashboardSummaryResponse, SalesBucket
from direcional.shared.enums import ApartmentStatus, ClientStatus, SaleStatus


class DashboardService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = DashboardRepository(db)

    def get_summary(self) -> DashboardSummaryResponse:
        """Indicadores do painel: estoque de apartamentos e carteira de vendas"""
        clients = self.repository.count_clients_by_status()
        apartments = self.repository.count_apartments_by_status()
        sales = self.repository.sales_by_status()

        # Todos os status aparecem, mesmo zerados
        clients_by_status = {s.value: clients.get(s.value, 0) for s in ClientStatus}
        apartments_by_status = {s.value: apartments.get(s.value, 0) for s in ApartmentStatus}
        sales_by_status = {
            s.value: SalesBucket(**sales[s.value]) if s.value in sales else SalesBucket()
            for s in SaleStatus
        }

        return DashboardSummaryResponse(
            success=True,
            message="Resumo do painel",
            total_clients=sum(clients_by_status.values()),
            clients_by_status=clients_by_status,
            total_apartments=sum(apartments_by_status.values()),
            apartments_by_status=apartments_by_status,
            total_sales=sum(b.count for b in sales_by_status.values()),
            sales_by_status=sales_by_status,
            confirmed_amount=self.repository.confirmed_amount(),
            active_amount=self.repository.active_amount()
        )
