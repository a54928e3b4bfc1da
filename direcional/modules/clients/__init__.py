# direcional/modules/clients/__init__.py
"""
Módulo de Clientes - Cadastro de compradores

- Cadastro com CPF único
- Atualização de contato e perfil financeiro
- Exclusão bloqueada para clientes com vendas
"""

from .router import router
from .service import ClientsService
from .repository import ClientsRepository

__all__ = [
    "router",
    "ClientsService",
    "ClientsRepository"
]
