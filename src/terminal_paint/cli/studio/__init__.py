"""Interactive applications."""

from terminal_paint.cli.studio.painter import PainterApp, run_painter

__all__ = ["PainterApp", "run_painter"]
