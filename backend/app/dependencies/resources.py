"""Dependencies for collaborators built once in ``create_app``."""

from fastapi import Request

from backend.app.core.settings import Settings
from backend.app.services.invoice_renderer import InvoicePdfRenderer


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_invoice_renderer(request: Request) -> InvoicePdfRenderer:
    return request.app.state.invoice_renderer
