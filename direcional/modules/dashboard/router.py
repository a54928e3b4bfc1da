# direcional/modules/dashboard/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from direcional.config.database import get_db
from direcional.core.auth.dependencies import get_current_user
from .service import DashboardService
from .schemas import DashboardSummaryResponse

router = APIRouter()

@router.get("/summary", response_model=DashboardSummaryResponse)
async def get_dashboard_summary(
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Resumo para o painel administrativo

    **Inclui:**
    - Clientes por status
    - Apartamentos por status (Disponível, Reservado, Vendido, Indisponível)
    - Vendas por status com valor somado
    - Valor confirmado e valor em negociação
    """
    return DashboardService(db).get_summary()
