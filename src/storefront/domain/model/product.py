"""Product as listed by the store.

Products are owned by the server. The client only reads them, so the
dataclass is frozen.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: str
    name: str
    price: Money
