"""
Pytest configuration and shared fixtures for the gallery test suite.
"""

import sys
from pathlib import Path

import pytest

# Ensure project root is on PYTHONPATH so 'gallery' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from gallery.core.generator import LayoutEngine  # noqa: E402
from gallery.core.registry import create_default_registry  # noqa: E402
from gallery.data.templates import BUILT_IN_TEMPLATES  # noqa: E402
from gallery.models import (  # noqa: E402
    AnchorType, CalculatorState, Frame, HorizontalAnchorType, PlacedFrame, Wall,
    rects_overlap,
)


@pytest.fixture
def engine():
    """
    Fixture providing a layout engine with the standard strategies and templates.
    """
    return LayoutEngine(create_default_registry(), BUILT_IN_TEMPLATES)


@pytest.fixture
def make_frames():
    """
    Factory for ``count`` identical frames with ids ``f1``, ``f2``, ...

    Extra keyword arguments are passed to every ``Frame``.
    """
    def _make(count, width=16, height=20, **kwargs):
        return [
            Frame(id=f"f{i}", width=width, height=height, **kwargs)
            for i in range(1, count + 1)
        ]
    return _make


@pytest.fixture
def make_state(make_frames):
    """
    Factory for a calculator state with test-friendly defaults.

    Defaults: one 16x20 frame, 120x96 wall, 4" spacing, group centered
    on the wall both ways. ``wall_width``/``wall_height`` override the
    wall; any other keyword overrides the matching state field.
    """
    def _make(wall_width=120, wall_height=96, **overrides):
        fields = {
            "wall": Wall(width=wall_width, height=wall_height),
            "frames": make_frames(1),
            "h_spacing": 4,
            "row_spacing": 3,
            "anchor_type": AnchorType.CENTER,
            "anchor_value": 0,
            "h_anchor_type": HorizontalAnchorType.CENTER,
            "h_anchor_value": 0,
        }
        fields.update(overrides)
        return CalculatorState(**fields)
    return _make


@pytest.fixture
def placed():
    """
    Factory for a placed frame: ``placed("a", x, y, w, h)``.
    """
    def _make(frame_id, x, y, width=20, height=20):
        return PlacedFrame(id=frame_id, x=x, y=y, width=width, height=height)
    return _make


@pytest.fixture
def overlapping_pairs():
    """
    Ids of placed frames that sit closer than ``gap`` to each other.
    """
    def _pairs(frames, gap=0.0):
        return [
            (a.id, b.id)
            for i, a in enumerate(frames)
            for b in frames[i + 1:]
            if rects_overlap(a.x, a.y, a.width, a.height, b.x, b.y, b.width, b.height, gap)
        ]
    return _pairs


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
