# direcional/modules/sales/transitions.py
"""
Máquina de estados da venda e o efeito de cada transição no apartamento.

Pendente / Em Análise -> Confirmada | Cancelada. Confirmada e Cancelada são finais.
"""
from typing import Dict, Optional, Set

from direcional.shared.enums import ApartmentStatus, SaleStatus


SALE_TRANSITIONS: Dict[SaleStatus, Set[SaleStatus]] = {
    SaleStatus.PENDING: {SaleStatus.CONFIRMED, SaleStatus.CANCELLED},
    SaleStatus.UNDER_REVIEW: {SaleStatus.CONFIRMED, SaleStatus.CANCELLED},
    SaleStatus.CONFIRMED: set(),
    SaleStatus.CANCELLED: set(),
}

# Status que o apartamento assume quando a venda entra em cada status
APARTMENT_STATUS_ON_SALE: Dict[SaleStatus, ApartmentStatus] = {
    SaleStatus.PENDING: ApartmentStatus.RESERVED,
    SaleStatus.UNDER_REVIEW: ApartmentStatus.RESERVED,
    SaleStatus.CONFIRMED: ApartmentStatus.SOLD,
    SaleStatus.CANCELLED: ApartmentStatus.AVAILABLE,
}

# Status definidos manualmente pelo cadastro; os demais só via vendas
MANUAL_APARTMENT_STATUSES = {ApartmentStatus.AVAILABLE, ApartmentStatus.UNAVAILABLE}


def can_transition(current: SaleStatus, target: SaleStatus) -> bool:
    return target in SALE_TRANSITIONS.get(SaleStatus(current), set())


def is_terminal(status: SaleStatus) -> bool:
    return not SALE_TRANSITIONS[SaleStatus(status)]


def apartment_status_for(sale_status: SaleStatus) -> Optional[ApartmentStatus]:
    return APARTMENT_STATUS_ON_SALE.get(SaleStatus(sale_status))
