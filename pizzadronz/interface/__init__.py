"""Mini README: HTTP interface for the PizzaDronz dispatch service.

Exports the FastAPI application factory. Request and response models live
in ``schemas`` alongside it.
"""

from .web_app import create_application

__all__ = ["create_application"]
