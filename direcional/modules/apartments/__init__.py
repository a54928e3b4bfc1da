# direcional/modules/apartments/__init__.py
"""
Módulo de Apartamentos - Cadastro de unidades

- Cadastro e atualização de atributos físicos e preço
- Consulta por status
- Status Reservado/Vendido controlado pelo módulo de vendas
"""

from .router import router
from .service import ApartmentsService
from .repository import ApartmentsRepository

__all__ = [
    "router",
    "ApartmentsService",
    "ApartmentsRepository"
]
