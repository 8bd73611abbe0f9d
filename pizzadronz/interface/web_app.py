"""Mini README: FastAPI-powered dispatch service for PizzaDronz.

Structure:
    * create_application - application factory wiring routes and handlers.
    * Geometry endpoints - distance, proximity, next position, region tests.
    * Order endpoints - validation, delivery path and GeoJSON path export.

Malformed requests are rejected with HTTP 400. Orders that fail a business
rule are still answered with HTTP 200 and carry their validation code.
Planning and data-source failures are fatal for the request and answered
with HTTP 500.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from ..configuration import PizzaDronzSettings, get_settings
from ..data_source import DataSourceError, DeliveryDataSource, RestDataSource
from ..geometry import distance, is_close, next_position, point_in_polygon
from ..logging_utils import configure_root_logger, get_logger, level_for_environment
from ..orders import OrderValidationCode, OrderValidator
from ..route_planning import PathPlanner, PlanningError, RestaurantNotFound
from .schemas import (
    DistanceRequest,
    NextPositionRequest,
    OrderPayload,
    RegionRequest,
    order_to_wire,
)

LOGGER = get_logger(__name__)


def _format_validation_error(error: RequestValidationError) -> str:
    parts = []
    for issue in error.errors():
        location = ".".join(str(item) for item in issue.get("loc", ()) if item != "body")
        parts.append(f"{location or 'body'}: {issue.get('msg')}")
    return "Invalid request: " + "; ".join(parts)


def create_application(
    data_source: Optional[DeliveryDataSource] = None,
    settings: Optional[PizzaDronzSettings] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    configure_root_logger(level_for_environment(settings.environment))
    if data_source is None:
        data_source = RestDataSource(
            settings.data_source_url, timeout_seconds=settings.request_timeout_seconds
        )

    app = FastAPI(title="PizzaDronz Dispatch Service", version="0.1.0")
    validator = OrderValidator(data_source)
    planner = PathPlanner(data_source, max_steps=settings.max_planning_steps)
    LOGGER.info("Dispatch service using %s", data_source.metadata())

    @app.exception_handler(RequestValidationError)
    async def reject_malformed_request(
        request: Request, error: RequestValidationError
    ) -> JSONResponse:
        message = _format_validation_error(error)
        LOGGER.debug("Rejected %s: %s", request.url.path, message)
        return JSONResponse(status_code=400, content={"detail": message})

    @app.exception_handler(PlanningError)
    @app.exception_handler(DataSourceError)
    async def report_fatal_error(request: Request, error: Exception) -> JSONResponse:
        LOGGER.error("Request to %s failed", request.url.path, exc_info=error)
        return JSONResponse(status_code=500, content={"detail": str(error)})

    @app.get("/uuid", response_class=PlainTextResponse)
    async def service_identifier() -> str:
        return settings.service_identifier

    @app.post("/distanceTo")
    async def distance_to(payload: DistanceRequest) -> float:
        """Return the flat-plane distance between two positions."""

        try:
            first, second = payload.position1.to_position(), payload.position2.to_position()
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return distance(first, second)

    @app.post("/isCloseTo")
    async def is_close_to(payload: DistanceRequest) -> bool:
        """Return whether two positions are within one drone move."""

        try:
            first, second = payload.position1.to_position(), payload.position2.to_position()
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return is_close(first, second)

    @app.post("/nextPosition")
    async def next_position_from(payload: NextPositionRequest) -> JSONResponse:
        """Return the position one move from ``start`` at ``angle`` degrees."""

        try:
            start = payload.start.to_position()
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(next_position(start, float(payload.angle)).as_dict())

    @app.post("/isInRegion")
    async def is_in_region(payload: RegionRequest) -> bool:
        """Return whether a position lies inside the supplied polygon."""

        try:
            position = payload.position.to_position()
            region = payload.region.to_region()
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return point_in_polygon(position, region.vertices)

    @app.post("/validateOrder")
    def validate_order(payload: Optional[OrderPayload] = Body(None)) -> JSONResponse:
        """Validate an order; rule failures are reported in the response body."""

        order = payload.to_domain() if payload is not None else None
        result = validator.validate(order)
        return JSONResponse(order_to_wire(result.order, result.code))

    @app.post("/calcDeliveryPath")
    def calc_delivery_path(
        payload: Optional[OrderPayload] = Body(None),
    ) -> JSONResponse:
        """Return the delivery path, or the order with its code when invalid."""

        order = payload.to_domain() if payload is not None else None
        result = validator.validate(order)
        if not result.is_valid:
            return JSONResponse(order_to_wire(result.order, result.code))
        try:
            flight_path = planner.plan_for_order(result.order)
        except RestaurantNotFound as error:
            LOGGER.warning("Order %s: %s", result.order.order_no, error)
            return JSONResponse(
                order_to_wire(result.order, OrderValidationCode.PIZZA_NOT_DEFINED)
            )
        return JSONResponse(flight_path.as_lng_lat())

    @app.post("/calcDeliveryPathAsGeoJson")
    def calc_delivery_path_as_geojson(
        payload: Optional[OrderPayload] = Body(None),
    ) -> JSONResponse:
        """Return the delivery path as a GeoJSON ``LineString``."""

        order = payload.to_domain() if payload is not None else None
        result = validator.validate(order)
        if not result.is_valid:
            raise HTTPException(
                status_code=400, detail=f"Invalid order: {result.code.value}"
            )
        try:
            flight_path = planner.plan_for_order(result.order)
        except RestaurantNotFound as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(flight_path.as_geojson())

    return app
