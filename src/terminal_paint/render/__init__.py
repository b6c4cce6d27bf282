"""Renderers for putting canvases on screen."""

from terminal_paint.render.terminal import Renderer, Screen, cell_sequence
from terminal_paint.render.text import TextRenderer, render_canvas

__all__ = ["Renderer", "Screen", "cell_sequence", "TextRenderer", "render_canvas"]
