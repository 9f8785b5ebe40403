from .base import Frame, Renderer, build_frame
from .text import TextRenderer, message_panel, render_bar

__all__ = ["Frame", "Renderer", "TextRenderer", "build_frame", "message_panel", "render_bar"]
