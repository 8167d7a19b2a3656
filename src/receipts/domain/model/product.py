"""Product aggregate.

Products live independently of orders.  A product with a ``parent_id``
is a *variation* of another product (e.g. "Hoodie" in size L), and
describes itself through its attribute values.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Product:
    """A product in the catalog."""

    id: str
    name: str
    parent_id: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def is_variation(self) -> bool:
        return self.parent_id is not None

    @property
    def attribute_summary(self) -> str:
        """Human-readable attribute list, e.g. ``"Size: L, Color: Blue"``."""
        return ", ".join(f"{name}: {value}" for name, value in self.attributes.items())
