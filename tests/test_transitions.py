import pytest

from direcional.modules.sales.transitions import (
    MANUAL_APARTMENT_STATUSES, apartment_status_for, can_transition, is_terminal
)
from direcional.shared.enums import ApartmentStatus, SaleStatus


@pytest.mark.parametrize("current", [SaleStatus.PENDING, SaleStatus.UNDER_REVIEW])
@pytest.mark.parametrize("target", [SaleStatus.CONFIRMED, SaleStatus.CANCELLED])
def test_active_sale_can_be_finalized(current, target):
    assert can_transition(current, target)


@pytest.mark.parametrize("current", [SaleStatus.CONFIRMED, SaleStatus.CANCELLED])
def test_finalized_sale_is_terminal(current):
    assert is_terminal(current)
    for target in SaleStatus:
        assert not can_transition(current, target)


def test_no_transition_back_to_pending():
    assert not can_transition(SaleStatus.UNDER_REVIEW, SaleStatus.PENDING)
    assert not can_transition(SaleStatus.PENDING, SaleStatus.PENDING)


def test_accepts_raw_status_values():
    assert can_transition("Pendente", SaleStatus.CONFIRMED)
    assert is_terminal("Cancelada")
    assert not is_terminal("Em Análise")


def test_apartment_follows_sale_status():
    assert apartment_status_for(SaleStatus.PENDING) == ApartmentStatus.RESERVED
    assert apartment_status_for(SaleStatus.UNDER_REVIEW) == ApartmentStatus.RESERVED
    assert apartment_status_for(SaleStatus.CONFIRMED) == ApartmentStatus.SOLD
    assert apartment_status_for(SaleStatus.CANCELLED) == ApartmentStatus.AVAILABLE


def test_reserved_and_sold_are_not_manual():
    assert ApartmentStatus.RESERVED not in MANUAL_APARTMENT_STATUSES
    assert ApartmentStatus.SOLD not in MANUAL_APARTMENT_STATUSES
