# direcional/modules/dashboard/__init__.py
"""Módulo de Painel - indicadores agregados de clientes, apartamentos e vendas."""

from .router import router
from .service import DashboardService

__all__ = [
    "router",
    "DashboardService"
]
