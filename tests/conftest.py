"""Mini README: Shared pytest fixtures for the PizzaDronz test-suite.

Fixtures:
    * central_area / restaurants - a small Edinburgh feed around Appleton Tower.
    * static_feed - ``StaticDataSource`` serving that feed without no-fly zones.
    * order_factory - builds orders whose total is correct unless overridden.
    * future_expiry - an ``MM/YY`` expiry one year after today.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Sequence, Tuple

import pytest

from pizzadronz.constants import ORDER_CHARGE_IN_PENCE
from pizzadronz.data_source import StaticDataSource
from pizzadronz.geometry import NamedRegion, Position
from pizzadronz.orders import CreditCardInformation, Order, Pizza, Restaurant

CIVERINOS = Position(lng=-3.1912869215011597, lat=55.945535152517735)


@pytest.fixture
def central_area() -> NamedRegion:
    return NamedRegion(
        name="central",
        vertices=(
            Position(-3.192473, 55.946233),
            Position(-3.192473, 55.942617),
            Position(-3.184319, 55.942617),
            Position(-3.184319, 55.946233),
        ),
    )


@pytest.fixture
def restaurants() -> Sequence[Restaurant]:
    return [
        Restaurant(
            name="Rest1",
            location=CIVERINOS,
            menu=(Pizza("R1: Margarita", 1000), Pizza("R1: Pepperoni", 1200)),
        ),
        Restaurant(
            name="Rest4",
            location=Position(-3.1900, 55.9440),
            menu=(
                Pizza("R4: Proper Pizza", 1400),
                Pizza("R4: Pineapple & Ham & Cheese", 900),
            ),
        ),
    ]


@pytest.fixture
def static_feed(restaurants, central_area) -> StaticDataSource:
    return StaticDataSource(restaurants=restaurants, no_fly_zones=[], central_area=central_area)


@pytest.fixture
def future_expiry() -> str:
    today = date.today()
    return f"{today.month:02d}/{(today.year + 1) % 100:02d}"


@pytest.fixture
def order_factory() -> Callable[..., Order]:
    def build(
        pizzas: Sequence[Tuple[str, int]] = (("R1: Margarita", 1000),),
        *,
        total: Optional[int] = None,
        card_number: Optional[str] = "4485959141852684",
        expiry: Optional[str] = "10/26",
        cvv: Optional[str] = "816",
        with_card: bool = True,
    ) -> Order:
        pizza_records = tuple(Pizza(name, price) for name, price in pizzas)
        if total is None:
            total = sum(price for _, price in pizzas) + ORDER_CHARGE_IN_PENCE
        card = (
            CreditCardInformation(
                credit_card_number=card_number, credit_card_expiry=expiry, cvv=cvv
            )
            if with_card
            else None
        )
        return Order(
            pizzas=pizza_records,
            price_total_in_pence=total,
            credit_card=card,
            order_no="ORD-1",
        )

    return build
