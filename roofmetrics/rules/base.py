"""Abstract base classes for all material rules.

Every material in a takeoff or an order implements one of these
interfaces. Rules are:
- Self-contained: each produces exactly one line
- Composable: the registry runs all applicable rules in order
- Conditional: each rule decides if it applies to the given metrics
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from roofmetrics.models import (
    RoofMetrics, AnyRequirement, OrderParams, OrderLineItem,
)


class Rule(ABC):
    """
    Identity, ordering and applicability shared by all rules.

    The registry filters by `applies()` and sorts by `priority`.
    """

    # Lower priority = listed first. Default 100.
    priority: int = 100

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this material (e.g., 'drip_edge')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Drip Edge')."""
        ...

    def applies(self, metrics: RoofMetrics) -> bool:
        """Return True if this material belongs on the list."""
        return True


class MaterialRule(Rule):
    """Raw and waste-adjusted quantity for one material."""

    @abstractmethod
    def estimate(self, metrics: RoofMetrics, waste_percent: float) -> AnyRequirement:
        ...


class OrderRule(Rule):
    """Purchasable package count for one product."""

    @abstractmethod
    def order(
        self, metrics: RoofMetrics, squares: float, params: OrderParams,
    ) -> OrderLineItem:
        """
        Build the order line.

        `squares` already includes the shingle waste for the chosen
        complexity, so deck-area products share one figure.
        """
        ...
