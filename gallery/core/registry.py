"""Layout registry: stores and resolves layout strategies."""

from __future__ import annotations

from gallery.models.context import LayoutContext
from gallery.layouts.base import LayoutStrategy


class LayoutRegistry:
    """
    Central registry for all layout strategies.

    Strategies are registered at startup. During a layout pass, the
    registry returns the applicable strategies sorted by priority.
    """

    def __init__(self) -> None:
        self._strategies: dict[str, LayoutStrategy] = {}

    def register(self, strategy: LayoutStrategy) -> None:
        """Register a layout strategy."""
        self._strategies[strategy.get_id()] = strategy

    def unregister(self, strategy_id: str) -> None:
        """Remove a strategy from the registry."""
        self._strategies.pop(strategy_id, None)

    def get_strategy(self, strategy_id: str) -> LayoutStrategy | None:
        return self._strategies.get(strategy_id)

    def list_strategies(self) -> list[LayoutStrategy]:
        """Return all registered strategies."""
        return list(self._strategies.values())

    def get_applicable(self, context: LayoutContext) -> list[LayoutStrategy]:
        """Return strategies that apply to the given context, sorted by priority."""
        applicable = [s for s in self._strategies.values() if s.applies(context)]
        applicable.sort(key=lambda s: s.priority)
        return applicable


def create_default_registry() -> LayoutRegistry:
    """Create a registry with all standard layout strategies."""
    from gallery.layouts.freeform import FreeformRowLayout
    from gallery.layouts.template import TemplateLayout

    registry = LayoutRegistry()
    registry.register(TemplateLayout())
    registry.register(FreeformRowLayout())
    return registry
