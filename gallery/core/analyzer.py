"""Layout analysis: resolves effective frames, furniture and template."""

from __future__ import annotations
import logging

from gallery.models import Frame, GalleryTemplate, LayoutContext, LayoutMode
from gallery.core.anchors import furniture_rect


log = logging.getLogger(__name__)


class LayoutAnalyzer:
    """Prepares a context before any layout strategy runs."""

    def __init__(self, templates: list[GalleryTemplate]) -> None:
        self.templates = {t.id: t for t in templates}

    def analyze(self, context: LayoutContext) -> None:
        """Run all analysis passes and populate the context."""
        state = context.state
        context.frames = self._effective_frames(context)
        context.furniture_rect = furniture_rect(state.furniture, state.wall)
        context.template = self._resolve_template(context)

    def _effective_frames(self, context: LayoutContext) -> list[Frame]:
        """Apply uniform sizing. Frames are copied, never modified."""
        state = context.state
        if not state.uniform_size:
            return list(state.frames)
        return [
            f.model_copy(update={"width": state.frame_width, "height": state.frame_height})
            for f in state.frames
        ]

    def _resolve_template(self, context: LayoutContext) -> GalleryTemplate | None:
        state = context.state
        if state.layout_mode != LayoutMode.TEMPLATE:
            return None
        if state.template_id is None:
            return None
        template = self.templates.get(state.template_id)
        if template is None:
            log.warning("Unknown template %r, falling back to freeform rows", state.template_id)
        return template
