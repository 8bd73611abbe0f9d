"""Mini README: Request and response models for the HTTP interface.

Structure:
    * LngLatModel / RegionModel - geometry request bodies.
    * DistanceRequest / NextPositionRequest / RegionRequest - endpoint bodies.
    * OrderPayload (+ PizzaModel, CreditCardModel) - order wire format.
    * order_to_wire - echo an order back with its validation code.

Wire names are camelCase; Python attributes are snake_case through aliases.
Coordinates must be JSON numbers: numeric strings are rejected rather than
coerced.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

from ..geometry import NamedRegion, Position, validate_position, validate_region
from ..orders import CreditCardInformation, Order, OrderValidationCode, Pizza

Number = Union[StrictInt, StrictFloat]


class LngLatModel(BaseModel):
    lng: Number
    lat: Number

    def to_position(self) -> Position:
        """Convert to a ``Position`` after the range check."""

        return validate_position(Position(lng=float(self.lng), lat=float(self.lat)))


class RegionModel(BaseModel):
    name: str = ""
    vertices: List[LngLatModel]

    def to_region(self) -> NamedRegion:
        region = NamedRegion(
            name=self.name,
            vertices=tuple(vertex.to_position() for vertex in self.vertices),
        )
        return validate_region(region)


class DistanceRequest(BaseModel):
    position1: LngLatModel
    position2: LngLatModel


class NextPositionRequest(BaseModel):
    start: LngLatModel
    angle: Number


class RegionRequest(BaseModel):
    position: LngLatModel
    region: RegionModel


class PizzaModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: StrictStr
    price_in_pence: StrictInt = Field(alias="priceInPence")


class CreditCardModel(BaseModel):
    """Card details; numeric JSON values are kept as their digit strings."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    credit_card_number: Optional[str] = Field(None, alias="creditCardNumber")
    credit_card_expiry: Optional[str] = Field(None, alias="creditCardExpiry")
    cvv: Optional[str] = None


class OrderPayload(BaseModel):
    """Order as submitted by clients; unknown keys are ignored."""

    model_config = ConfigDict(populate_by_name=True)

    order_no: Optional[str] = Field(None, alias="orderNo")
    order_date: Optional[str] = Field(None, alias="orderDate")
    price_total_in_pence: StrictInt = Field(0, alias="priceTotalInPence")
    pizzas_in_order: Optional[List[PizzaModel]] = Field(None, alias="pizzasInOrder")
    credit_card_information: Optional[CreditCardModel] = Field(
        None, alias="creditCardInformation"
    )

    def to_domain(self) -> Order:
        card = None
        if self.credit_card_information is not None:
            card = CreditCardInformation(
                credit_card_number=self.credit_card_information.credit_card_number,
                credit_card_expiry=self.credit_card_information.credit_card_expiry,
                cvv=self.credit_card_information.cvv,
            )
        return Order(
            pizzas=tuple(
                Pizza(name=pizza.name, price_in_pence=pizza.price_in_pence)
                for pizza in self.pizzas_in_order or []
            ),
            price_total_in_pence=self.price_total_in_pence,
            credit_card=card,
            order_no=self.order_no,
            order_date=self.order_date,
        )


def order_to_wire(order: Optional[Order], code: OrderValidationCode) -> Dict[str, object]:
    """Serialise ``order`` (or an empty order) together with its validation code."""

    order = order or Order()
    card = order.credit_card
    return {
        "orderNo": order.order_no,
        "orderDate": order.order_date,
        "orderValidationCode": code.value,
        "priceTotalInPence": order.price_total_in_pence,
        "pizzasInOrder": [
            {"name": pizza.name, "priceInPence": pizza.price_in_pence}
            for pizza in order.pizzas
        ],
        "creditCardInformation": None
        if card is None
        else {
            "creditCardNumber": card.credit_card_number,
            "creditCardExpiry": card.credit_card_expiry,
            "cvv": card.cvv,
        },
    }
