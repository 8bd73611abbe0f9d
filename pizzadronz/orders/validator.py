"""Mini README: Short-circuiting order validation pipeline.

Structure:
    * is_valid_expiry - ``MM/YY`` parser with a five year acceptance window.
    * build_menu_index - pizza name to owning restaurant name mapping.
    * OrderValidator - runs the ordered rules and returns the first failure.

Rules run strictly in this order and stop at the first failure: empty
order, pizza count, total, card number, expiry, CVV, restaurant membership.
The restaurant feed is read only when the earlier rules pass, once per
validation.
"""

from __future__ import annotations

import re
from datetime import date
from typing import TYPE_CHECKING, Callable, Dict, Iterable, Optional

from ..constants import MAX_CARD_VALIDITY_YEARS, MAX_PIZZAS_PER_ORDER, ORDER_CHARGE_IN_PENCE
from ..logging_utils import get_logger
from .models import (
    CreditCardInformation,
    Order,
    OrderValidationCode,
    Restaurant,
    ValidationOutcome,
    ValidationResult,
)

if TYPE_CHECKING:
    from ..data_source import DeliveryDataSource

LOGGER = get_logger(__name__)

CARD_NUMBER_PATTERN = re.compile(r"[0-9]{16}")
EXPIRY_PATTERN = re.compile(r"([0-9]{2})/([0-9]{2})")
CVV_PATTERN = re.compile(r"[0-9]{3}")


def is_valid_expiry(expiry: Optional[str], today: date) -> bool:
    """Return whether ``expiry`` (``MM/YY``) is usable in the month of ``today``.

    The card must not have expired before the current month and must not
    expire more than five years after it. Anything unparsable is invalid.
    """

    if expiry is None:
        return False
    match = EXPIRY_PATTERN.fullmatch(expiry)
    if match is None:
        return False
    month, year = int(match.group(1)), 2000 + int(match.group(2))
    if month < 1 or month > 12:
        return False
    current = (today.year, today.month)
    latest = (today.year + MAX_CARD_VALIDITY_YEARS, today.month)
    return current <= (year, month) <= latest


def build_menu_index(restaurants: Iterable[Restaurant]) -> Dict[str, str]:
    """Map every menu item name in the feed to its restaurant's name."""

    index: Dict[str, str] = {}
    for restaurant in restaurants:
        for pizza in restaurant.menu:
            owner = index.setdefault(pizza.name, restaurant.name)
            if owner != restaurant.name:
                LOGGER.warning(
                    "Pizza '%s' listed by both %s and %s; keeping %s",
                    pizza.name,
                    owner,
                    restaurant.name,
                    owner,
                )
    return index


def _card_number_invalid(card: Optional[CreditCardInformation]) -> bool:
    return (
        card is None
        or card.credit_card_number is None
        or CARD_NUMBER_PATTERN.fullmatch(card.credit_card_number) is None
    )


class OrderValidator:
    """Validate orders against business rules and the restaurant feed."""

    def __init__(
        self,
        data_source: DeliveryDataSource,
        *,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.data_source = data_source
        self.clock = clock

    def check(self, order: Optional[Order]) -> ValidationOutcome:
        """Run the rule pipeline, returning the first failing rule's outcome."""

        if order is None or not order.pizzas:
            return ValidationOutcome.of(OrderValidationCode.EMPTY_ORDER)

        if len(order.pizzas) > MAX_PIZZAS_PER_ORDER:
            return ValidationOutcome.of(OrderValidationCode.MAX_PIZZA_COUNT_EXCEEDED)

        if order.pizza_total_in_pence + ORDER_CHARGE_IN_PENCE != order.price_total_in_pence:
            return ValidationOutcome.of(OrderValidationCode.TOTAL_INCORRECT)

        card = order.credit_card
        if _card_number_invalid(card):
            return ValidationOutcome.of(OrderValidationCode.CARD_NUMBER_INVALID)
        if not is_valid_expiry(card.credit_card_expiry, self.clock()):
            return ValidationOutcome.of(OrderValidationCode.EXPIRY_DATE_INVALID)
        if card.cvv is None or CVV_PATTERN.fullmatch(card.cvv) is None:
            return ValidationOutcome.of(OrderValidationCode.CVV_INVALID)

        return self._check_restaurants(order)

    def _check_restaurants(self, order: Order) -> ValidationOutcome:
        menu_index = build_menu_index(self.data_source.restaurants())
        owners = set()
        for pizza in order.pizzas:
            owner = menu_index.get(pizza.name)
            if owner is None:
                LOGGER.info("Pizza '%s' is not on any restaurant menu", pizza.name)
                return ValidationOutcome.lookup_failed(pizza.name)
            owners.add(owner)
        if len(owners) != 1:
            return ValidationOutcome.of(OrderValidationCode.PIZZA_FROM_MULTIPLE_RESTAURANTS)
        return ValidationOutcome.of(OrderValidationCode.NO_ERROR)

    def validate(self, order: Optional[Order]) -> ValidationResult:
        """Return the order paired with its visible validation code."""

        outcome = self.check(order)
        code = outcome.resolve()
        LOGGER.info(
            "Validated order %s -> %s",
            order.order_no if order is not None else None,
            code.value,
        )
        return ValidationResult(order=order, code=code)
