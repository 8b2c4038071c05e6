"""Built-in gallery templates.

Slots use relative coordinates (0-1) that get scaled to fit the wall.
"""

from __future__ import annotations

from gallery.models import GalleryTemplate, TemplateSlot


def _slot(slot_id: str, x: float, y: float, width: float, height: float) -> TemplateSlot:
    return TemplateSlot(id=slot_id, x=x, y=y, width=width, height=height)


BUILT_IN_TEMPLATES: list[GalleryTemplate] = [
    GalleryTemplate(
        id="triptych",
        name="Triptych",
        description="3 frames in a row, center larger",
        aspect_ratio=2.5,
        slots=[
            _slot("s1", 0, 0.15, 0.25, 0.7),
            _slot("s2", 0.3, 0, 0.4, 1),
            _slot("s3", 0.75, 0.15, 0.25, 0.7),
        ],
    ),
    GalleryTemplate(
        id="staircase",
        name="Staircase",
        description="Diagonal ascending arrangement",
        aspect_ratio=2,
        slots=[
            _slot("s1", 0, 0.7, 0.22, 0.3),
            _slot("s2", 0.26, 0.5, 0.22, 0.3),
            _slot("s3", 0.52, 0.3, 0.22, 0.3),
            _slot("s4", 0.78, 0.1, 0.22, 0.3),
        ],
    ),
    GalleryTemplate(
        id="salon-4",
        name="Salon (4)",
        description="Asymmetric cluster of 4 frames",
        aspect_ratio=1.4,
        slots=[
            _slot("s1", 0, 0, 0.45, 0.55),
            _slot("s2", 0.5, 0, 0.5, 0.4),
            _slot("s3", 0, 0.6, 0.35, 0.4),
            _slot("s4", 0.4, 0.45, 0.6, 0.55),
        ],
    ),
    GalleryTemplate(
        id="salon-6",
        name="Salon (6)",
        description="Asymmetric cluster of 6 frames",
        aspect_ratio=1.6,
        slots=[
            _slot("s1", 0, 0, 0.3, 0.45),
            _slot("s2", 0.35, 0, 0.35, 0.35),
            _slot("s3", 0.75, 0, 0.25, 0.5),
            _slot("s4", 0, 0.5, 0.25, 0.5),
            _slot("s5", 0.3, 0.4, 0.4, 0.6),
            _slot("s6", 0.75, 0.55, 0.25, 0.45),
        ],
    ),
    GalleryTemplate(
        id="feature-wall",
        name="Feature Wall",
        description="Large center with small sides",
        aspect_ratio=1.8,
        slots=[
            _slot("s1", 0, 0.1, 0.18, 0.35),
            _slot("s2", 0, 0.55, 0.18, 0.35),
            _slot("s3", 0.22, 0, 0.56, 1),
            _slot("s4", 0.82, 0.1, 0.18, 0.35),
            _slot("s5", 0.82, 0.55, 0.18, 0.35),
        ],
    ),
]


def get_template_by_id(template_id: str) -> GalleryTemplate | None:
    for t in BUILT_IN_TEMPLATES:
        if t.id == template_id:
            return t
    return None
