# direcional/modules/sales/__init__.py
"""
Módulo de Vendas - Ciclo de vida da venda

Este módulo controla as vendas de apartamentos e o status que elas impõem
ao apartamento:
- Registro de venda (apartamento Disponível -> Reservado)
- Confirmação (venda Confirmada, apartamento Vendido)
- Cancelamento e exclusão (apartamento volta a Disponível)
- Consultas por cliente, apartamento e status

Arquitetura:
- router.py: Endpoints de vendas
- service.py: Regras do ciclo de vida e limite da transação
- repository.py: Acesso a dados com bloqueio de linha
- transitions.py: Máquina de estados venda/apartamento
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import SalesService
from .repository import SalesRepository

__all__ = [
    "router",
    "SalesService",
    "SalesRepository"
]
