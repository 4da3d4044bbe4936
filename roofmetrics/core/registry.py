"""Rule registry — stores and resolves material and order rules."""

from __future__ import annotations
from typing import Generic, Protocol, TypeVar

from roofmetrics.models import RoofMetrics
from roofmetrics.rules.base import Rule, MaterialRule, OrderRule


R = TypeVar("R", bound=Rule)


class MaterialFilter(Protocol):
    enabled_materials: list[str]
    disabled_materials: list[str]


class RuleRegistry(Generic[R]):
    """
    Central registry for rules of one kind.

    Rules are registered at startup. During estimation, the registry
    returns the applicable rules sorted by priority.
    """

    def __init__(self) -> None:
        self._rules: dict[str, R] = {}

    def register(self, rule: R) -> None:
        """Register a rule."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> R | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[R]:
        """Return all registered rules, in priority order."""
        return sorted(self._rules.values(), key=lambda r: r.priority)

    def get_applicable_rules(
        self, metrics: RoofMetrics, params: MaterialFilter,
    ) -> list[R]:
        """
        Return rules that apply to the given metrics, sorted by priority.

        Respects the params' enabled_materials and disabled_materials.
        """
        candidates = self.list_rules()

        if params.enabled_materials:
            candidates = [r for r in candidates if r.get_id() in params.enabled_materials]

        if params.disabled_materials:
            candidates = [r for r in candidates if r.get_id() not in params.disabled_materials]

        return [r for r in candidates if r.applies(metrics)]


MaterialRegistry = RuleRegistry[MaterialRule]
OrderRegistry = RuleRegistry[OrderRule]


def create_default_registry() -> MaterialRegistry:
    """Create a registry with all standard roofing materials."""
    from roofmetrics.rules.materials.linear import (
        StarterStripRule, DripEdgeRule, HipRidgeCapRule,
        ValleyMetalRule, IceWaterShieldRule,
    )
    from roofmetrics.rules.materials.shingles import ShingleRule

    registry: MaterialRegistry = RuleRegistry()
    for rule in (
        ShingleRule(), StarterStripRule(), DripEdgeRule(),
        HipRidgeCapRule(), ValleyMetalRule(), IceWaterShieldRule(),
    ):
        registry.register(rule)
    return registry


def create_order_registry() -> OrderRegistry:
    """Create a registry with all standard order products."""
    from roofmetrics.rules.orders.packages import (
        ShingleBundleRule, StarterBundleRule, HipCapBundleRule, RidgeCapBundleRule,
        IceWaterRollRule, DeckUnderlaymentRollRule, DripEdgePieceRule,
        ValleyMetalPieceRule, NailBoxRule,
    )

    registry: OrderRegistry = RuleRegistry()
    for rule in (
        ShingleBundleRule(), StarterBundleRule(), HipCapBundleRule(),
        RidgeCapBundleRule(), IceWaterRollRule(), DeckUnderlaymentRollRule(),
        DripEdgePieceRule(), ValleyMetalPieceRule(), NailBoxRule(),
    ):
        registry.register(rule)
    return registry
