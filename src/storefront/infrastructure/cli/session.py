"""Helpers shared by every command: build a controller and load it."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import click

from storefront.application.controller import StoreController
from storefront.application.state import NotificationLevel
from storefront.domain.exceptions import DomainException
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.display import NotificationPrinter
from storefront.infrastructure.config import Settings

T = TypeVar("T")


def run_session(
    settings: Settings,
    action: Callable[[StoreController], Awaitable[T]],
) -> T:
    """Load the store, then run *action* against the loaded controller.

    A failed load has already been reported by the time this returns, so
    the command just exits non-zero. Store errors raised by *action*
    become ``click.ClickException``.
    """
    controller = bootstrap.store_controller(settings)
    controller.subscribe(NotificationPrinter())

    async def _session() -> T:
        await controller.load()
        notification = controller.state.notification
        if notification is not None and notification.level is NotificationLevel.ERROR:
            raise click.exceptions.Exit(1)
        return await action(controller)

    try:
        return asyncio.run(_session())
    except DomainException as exc:
        raise click.ClickException(str(exc))
