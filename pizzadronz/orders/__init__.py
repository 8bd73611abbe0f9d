"""Mini README: Order domain model and the validation pipeline.

Exports the immutable order records, the outcome code enum and the
``OrderValidator`` that runs the ordered business-rule checks.
"""

from .models import (
    CreditCardInformation,
    Order,
    OrderValidationCode,
    Pizza,
    Restaurant,
    ValidationOutcome,
    ValidationResult,
)
from .validator import OrderValidator, build_menu_index, is_valid_expiry

__all__ = [
    "CreditCardInformation",
    "Order",
    "OrderValidationCode",
    "OrderValidator",
    "Pizza",
    "Restaurant",
    "ValidationOutcome",
    "ValidationResult",
    "build_menu_index",
    "is_valid_expiry",
]
