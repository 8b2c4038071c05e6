"""Batch layout engine: orchestrates analysis and strategy execution."""

from __future__ import annotations
import logging

from gallery.models import (
    CalculatorState, FramePosition, GalleryTemplate, LayoutContext,
)
from gallery.core.registry import LayoutRegistry
from gallery.core.analyzer import LayoutAnalyzer


log = logging.getLogger(__name__)


class LayoutEngine:
    """
    Stateless layout engine.

    Takes a calculator state, runs analysis, executes the preferred
    applicable strategy, and returns one position per input frame in
    input order.
    """

    def __init__(self, registry: LayoutRegistry, templates: list[GalleryTemplate]) -> None:
        self.registry = registry
        self.analyzer = LayoutAnalyzer(templates)

    def calculate(self, state: CalculatorState) -> list[FramePosition]:
        if not state.frames:
            return []

        context = LayoutContext(state=state)

        # Analysis phase: effective frames, furniture, template
        self.analyzer.analyze(context)

        # Layout phase: the highest-ranked applicable strategy wins
        strategies = self.registry.get_applicable(context)
        if not strategies:
            log.warning("No layout strategy applies (mode=%s)", state.layout_mode.value)
            return []
        strategy = strategies[0]
        log.debug("Laying out %d frame(s) with %s", len(context.frames), strategy.get_id())

        for index, position in strategy.layout(context):
            context.add_position(index, position)

        return context.ordered_positions()
