"""Abstract base class for all layout strategies.

Every layout mode implements this interface. Strategies are:
- Self-contained: each turns the context's frames into positions
- Conditional: each decides if it applies to the current configuration
- Ranked: the engine runs the applicable strategy with the lowest priority
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from gallery.models import FramePosition, LayoutContext


class LayoutStrategy(ABC):
    """
    Base class for all layout strategies.

    Subclasses implement `applies()` and `layout()`.
    The engine queries the registry, filters by `applies()`,
    sorts by `priority`, and calls `layout()` on the first one.
    """

    # Lower priority = preferred. Default 100.
    priority: int = 100

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this strategy (e.g., 'layout.freeform')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Freeform Rows')."""
        ...

    @abstractmethod
    def applies(self, context: LayoutContext) -> bool:
        """Return True if this strategy can lay out the given context."""
        ...

    @abstractmethod
    def layout(self, context: LayoutContext) -> list[tuple[int, FramePosition]]:
        """
        Position every frame in ``context.frames``.

        Returns ``(input index, position)`` pairs; the engine restores
        input order.
        """
        ...
