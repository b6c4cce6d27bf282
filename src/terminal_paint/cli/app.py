"""Typer CLI application."""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from terminal_paint.core.canvas import TerminalTooSmallError
from terminal_paint.core.color import color_name
from terminal_paint.core.constants import DEFAULT_SAVE_FILE


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="terminal-paint",
        help="Paint colored characters in your terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.command()
    def paint(
        file: Annotated[
            Path,
            typer.Option("--file", "-f", envvar="TERMINAL_PAINT_FILE", help="File used by save (S) and load (L)"),
        ] = Path(DEFAULT_SAVE_FILE),
        log_file: Annotated[
            Optional[Path],
            typer.Option("--log-file", help="Write a log to this file"),
        ] = None,
    ) -> None:
        """Launch the interactive painter."""
        from terminal_paint.cli.studio.painter import run_painter

        if log_file is not None:
            from terminal_paint.logging_setup import configure_logging
            configure_logging(log_file)

        try:
            run_painter(file)
        except TerminalTooSmallError as e:
            err_console.print(f"[red]Error: {escape(str(e))}[/]")
            raise typer.Exit(1)
        except MemoryError:
            err_console.print("[red]Error: failed to allocate canvas memory[/]")
            raise typer.Exit(1)

    @app.command()
    def show(
        path: Annotated[Path, typer.Argument(help="Saved canvas to print")],
        plain: Annotated[bool, typer.Option("--plain", "-p", help="Print without colors")] = False,
    ) -> None:
        """Print a saved canvas to the terminal."""
        from terminal_paint.io.reader import CanvasFormatError, parse
        from terminal_paint.render.text import render_canvas

        try:
            canvas = parse(path.read_text(encoding="ascii"))
        except (OSError, UnicodeDecodeError, CanvasFormatError) as e:
            err_console.print(f"[red]Cannot read {path}: {escape(str(e))}[/]")
            raise typer.Exit(1)

        print(render_canvas(canvas, color=not plain))

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="Saved canvas to inspect")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Check a saved canvas and summarize its contents."""
        from terminal_paint.io.reader import CanvasFormatError, parse

        try:
            canvas = parse(path.read_text(encoding="ascii"))
        except (OSError, UnicodeDecodeError, CanvasFormatError) as e:
            if json_output:
                print(json.dumps({"valid": False, "error": str(e)}, indent=2))
            else:
                console.print(f"[red]{path.name} is not a valid canvas: {escape(str(e))}[/]")
            raise typer.Exit(1)

        colors = Counter(cell.color for _, _, cell in canvas.cells())
        painted = sum(1 for _, _, cell in canvas.cells() if cell.char != ' ')

        if json_output:
            data = {
                "valid": True,
                "width": canvas.width,
                "height": canvas.height,
                "painted_cells": painted,
                "colors": {color_name(c): n for c, n in sorted(colors.items())},
            }
            print(json.dumps(data, indent=2))
        else:
            console.print(f"[bold cyan]Canvas {path.name}[/]")
            console.print(f"  [bold]Size:[/]    {canvas.width}x{canvas.height}")
            console.print(f"  [bold]Painted:[/] {painted} cells")
            console.print("  [bold]Colors:[/]")
            for c, n in sorted(colors.items()):
                console.print(f"    {color_name(c):<8} {n}")

    return app
