# direcional/modules/dashboard/schemas.py
from pydantic import BaseModel
from typing import Dict
from decimal import Decimal

from direcional.shared.schemas.common import BaseResponse


class SalesBucket(BaseModel):
    count: int = 0
    amount: Decimal = Decimal("0")


class DashboardSummaryResponse(BaseResponse):
    total_clients: int
    clients_by_status: Dict[str, int]
    total_apartments: int
    apartments_by_status: Dict[str, int]
    total_sales: int
    sales_by_status: Dict[str, SalesBucket]
    confirmed_amount: Decimal
    active_amount: Decimal
