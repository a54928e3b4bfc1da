# direcional/shared/enums.py
"""
Status das entidades.

Os valores são os rótulos gravados no banco e exibidos no painel.
"""
from enum import Enum


class ClientStatus(str, Enum):
    ACTIVE = "Ativo"
    INACTIVE = "Inativo"
    PROSPECT = "Prospecto"


class ApartmentStatus(str, Enum):
    AVAILABLE = "Disponível"
    RESERVED = "Reservado"
    SOLD = "Vendido"
    UNAVAILABLE = "Indisponível"


class SaleStatus(str, Enum):
    PENDING = "Pendente"
    CONFIRMED = "Confirmada"
    CANCELLED = "Cancelada"
    UNDER_REVIEW = "Em Análise"


class UserRole(str, Enum):
    ADMIN = "Admin"
    USER = "User"


# Vendas que ainda prendem o apartamento e podem mudar de status
ACTIVE_SALE_STATUSES = (SaleStatus.PENDING, SaleStatus.UNDER_REVIEW)
