"""Spacing solver for items laid out along one axis."""

from __future__ import annotations

from gallery.models import Distribution


def distribute(
    count: int,
    item_span: float,
    container_span: float,
    fixed_gap: float,
    mode: Distribution,
) -> tuple[float, float]:
    """Return ``(start_offset, gap)`` for *count* items inside a container.

    *item_span* is the summed size of the items along the axis. For
    ``fixed`` the offset is 0: the caller places the group with the
    anchor resolver instead.
    """
    if mode == Distribution.FIXED:
        return 0.0, fixed_gap

    available = container_span - item_span
    if count <= 0:
        return 0.0, 0.0

    if mode == Distribution.SPACE_BETWEEN:
        gap = available / (count - 1) if count > 1 else 0.0
        return 0.0, gap
    if mode == Distribution.SPACE_EVENLY:
        gap = available / (count + 1)
        return gap, gap
    if mode == Distribution.SPACE_AROUND:
        gap = available / count
        return gap / 2, gap
    raise ValueError(f"Unknown distribution: {mode}")


def group_span(sizes: list[float], gap: float) -> float:
    """Total extent of items separated by a fixed gap."""
    if not sizes:
        return 0.0
    return sum(sizes) + (len(sizes) - 1) * gap
