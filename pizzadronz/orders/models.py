"""Mini README: Order, menu and outcome records.

Structure:
    * OrderValidationCode - enum of validation outcomes using wire names.
    * Pizza / Restaurant - menu records from the restaurant feed.
    * CreditCardInformation / Order - immutable request payload.
    * ValidationOutcome - either a business code or an unresolved pizza.
    * ValidationResult - the untouched order paired with its visible code.

Orders are never mutated once built; the validation code travels in a
separate ``ValidationResult`` so callers cannot alias a half-validated order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, cast

from ..geometry import Position


class OrderValidationCode(str, Enum):
    """Outcome of the order validation pipeline."""

    UNDEFINED = "UNDEFINED"
    NO_ERROR = "NO_ERROR"
    EMPTY_ORDER = "EMPTY_ORDER"
    MAX_PIZZA_COUNT_EXCEEDED = "MAX_PIZZA_COUNT_EXCEEDED"
    TOTAL_INCORRECT = "TOTAL_INCORRECT"
    CARD_NUMBER_INVALID = "CARD_NUMBER_INVALID"
    EXPIRY_DATE_INVALID = "EXPIRY_DATE_INVALID"
    CVV_INVALID = "CVV_INVALID"
    PIZZA_NOT_DEFINED = "PIZZA_NOT_DEFINED"
    PIZZA_FROM_MULTIPLE_RESTAURANTS = "PIZZA_FROM_MULTIPLE_RESTAURANTS"


@dataclass(frozen=True, slots=True)
class Pizza:
    """Menu item named ``"<RestaurantPrefix>: <ItemName>"``, priced in pence."""

    name: str
    price_in_pence: int

    @property
    def restaurant_prefix(self) -> Optional[str]:
        """Text before the first ``:``, or ``None`` when the name has no prefix."""

        if ":" not in self.name:
            return None
        return self.name.split(":", 1)[0].strip()


@dataclass(frozen=True, slots=True)
class Restaurant:
    name: str
    location: Position
    menu: Tuple[Pizza, ...] = ()


@dataclass(frozen=True, slots=True)
class CreditCardInformation:
    credit_card_number: Optional[str] = None
    credit_card_expiry: Optional[str] = None
    cvv: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Order:
    """Submitted order; optional bookkeeping fields are echoed back untouched."""

    pizzas: Tuple[Pizza, ...] = ()
    price_total_in_pence: int = 0
    credit_card: Optional[CreditCardInformation] = None
    order_no: Optional[str] = None
    order_date: Optional[str] = None

    @property
    def pizza_total_in_pence(self) -> int:
        return sum(pizza.price_in_pence for pizza in self.pizzas)


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    """Result of the rule pipeline before it is shown to a caller.

    Exactly one of ``code`` and ``unresolved_pizza`` is set. A pizza missing
    from the restaurant feed is kept apart from the business codes so the
    caller decides how to present it.
    """

    code: Optional[OrderValidationCode] = None
    unresolved_pizza: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.code is None) == (self.unresolved_pizza is None):
            raise ValueError("ValidationOutcome needs exactly one of code or unresolved_pizza")

    @classmethod
    def of(cls, code: OrderValidationCode) -> "ValidationOutcome":
        return cls(code=code)

    @classmethod
    def lookup_failed(cls, pizza_name: str) -> "ValidationOutcome":
        return cls(unresolved_pizza=pizza_name)

    @property
    def is_lookup_failure(self) -> bool:
        return self.unresolved_pizza is not None

    def resolve(self) -> OrderValidationCode:
        """Visible code: lookup failures surface as ``PIZZA_NOT_DEFINED``."""

        if self.unresolved_pizza is not None:
            return OrderValidationCode.PIZZA_NOT_DEFINED
        return cast(OrderValidationCode, self.code)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    order: Optional[Order]
    code: OrderValidationCode

    @property
    def is_valid(self) -> bool:
        return self.code is OrderValidationCode.NO_ERROR
