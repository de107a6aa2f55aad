"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.controller import StoreController
from storefront.infrastructure.config import Settings
from storefront.infrastructure.http.api_client import HttpStoreGateway


def store_gateway(settings: Settings) -> HttpStoreGateway:
    return HttpStoreGateway(
        base_url=settings.api_url,
        user_id=settings.user_id,
        timeout=settings.timeout,
    )


def store_controller(settings: Settings) -> StoreController:
    return StoreController(gateway=store_gateway(settings))
