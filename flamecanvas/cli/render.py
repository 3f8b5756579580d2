"""CLI commands for rendering and inspecting flame graphs."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from flamecanvas.config.validation import ConfigValidator
from flamecanvas.utils.logging_config import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for flamecanvas commands.

    Returns
    -------
    argparse.ArgumentParser
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="flamecanvas",
        description="Render and inspect flame graphs of call tree profiles",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=ConfigValidator.VALID_LOG_LEVELS,
        help="Logging level for flamecanvas messages",
    )
    parser.add_argument("--log-file", type=Path, help="Also write log messages to this file")

    subparsers = parser.add_subparsers(dest="subcommand", required=True)

    # render subcommand
    render_parser = subparsers.add_parser(
        "render",
        help="Render a flame graph window to an image or HTML page",
    )
    render_parser.add_argument("model", type=Path, help="Path to call tree model JSON")
    render_parser.add_argument(
        "--output", "-o", type=Path, required=True, help="Output path (.png, .svg, .pdf, .html)"
    )
    render_parser.add_argument("--config", "-c", type=Path, help="YAML configuration file")
    render_parser.add_argument("--min-x", type=float, default=0.0, help="Window start (0-1)")
    render_parser.add_argument("--max-x", type=float, default=1.0, help="Window end (0-1)")
    render_parser.add_argument(
        "--level", type=int, default=0, help="Fade ancestors above this depth"
    )
    render_parser.add_argument("--y", type=float, default=0.0, help="Vertical scroll [px]")
    render_parser.add_argument(
        "--zoom",
        type=str,
        help="Zoom to the widest box of this function (overrides --min-x/--max-x/--level)",
    )
    render_parser.add_argument("--width", type=int, default=1200, help="Canvas width [px]")
    render_parser.add_argument(
        "--height", type=int, help="Canvas height [px] (default: full content height)"
    )

    # inspect subcommand
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Print the boxes with the most self time",
    )
    inspect_parser.add_argument("model", type=Path, help="Path to call tree model JSON")
    inspect_parser.add_argument("--top", type=int, default=20, help="Number of rows")

    # formats subcommand
    subparsers.add_parser("formats", help="List supported output formats")

    return parser


def _render(args: argparse.Namespace) -> int:
    from flamecanvas.config import FlameGraphConfig, ValidationError, load_config
    from flamecanvas.interaction import FlameGraphController
    from flamecanvas.model import load_model
    from flamecanvas.viewport import Bounds, CanvasSize

    fmt = args.output.suffix.lstrip(".").lower()
    ConfigValidator.validate_choice(
        fmt,
        "output format",
        ConfigValidator.VALID_OUTPUT_FORMATS,
        ConfigValidator.OUTPUT_FORMAT_DESCRIPTIONS,
    )
    if not 0 <= args.min_x < args.max_x <= 1:
        raise ValidationError(
            ConfigValidator.format_range_error(
                "window", f"[{args.min_x}, {args.max_x}]", "0 <= min-x < max-x <= 1"
            )
        )
    ConfigValidator.validate_positive(args.width, "width")

    config = load_config(args.config) if args.config else FlameGraphConfig()
    model = load_model(args.model)
    controller = FlameGraphController(model, config=config)

    box_set = controller.box_set
    height = args.height or max(int(box_set.max_y), int(config.layout.timeline_height) + 1)
    controller.resize(CanvasSize(width=args.width, height=height))
    controller.bounds = Bounds(min_x=args.min_x, max_x=args.max_x, y=args.y, level=args.level)

    if args.zoom:
        matches = [b for b in box_set.boxes if b.text == args.zoom]
        if not matches:
            logger.error(f"No box for function '{args.zoom}'")
            return 1
        controller.zoom_to_box(max(matches, key=lambda b: b.x2 - b.x1))

    visible = controller.visible
    logger.info(
        f"Rendering {len(visible.boxes)} of {len(box_set)} boxes "
        f"[{controller.bounds.min_x:.4f}, {controller.bounds.max_x:.4f}]"
    )

    if fmt == "html":
        from flamecanvas.visualization.interactive import create_flame_graph_figure

        fig = create_flame_graph_figure(
            visible.boxes, controller.bounds, duration=model.duration, title=args.model.stem
        )
        fig.write_html(str(args.output))
    else:
        from flamecanvas.visualization.static import FlameGraphPlotter

        args.output.parent.mkdir(parents=True, exist_ok=True)
        with FlameGraphPlotter(config.layout) as plotter:
            plotter.plot(
                visible.boxes,
                controller.bounds,
                controller.canvas,
                ticks=controller.timeline(),
                focused_id=controller.focused.graph_id if controller.focused else None,
            )
            plotter.save(args.output)

    logger.info(f"Flame graph saved to {args.output}")
    return 0


def _inspect(args: argparse.Namespace) -> int:
    from rich.console import Console
    from rich.table import Table

    from flamecanvas.display import format_ms, location_text
    from flamecanvas.graph import build_boxes, build_columns
    from flamecanvas.model import load_model

    model = load_model(args.model)
    box_set = build_boxes(build_columns(model))
    hottest = sorted(box_set.boxes, key=lambda b: b.frame.self_time, reverse=True)[: args.top]

    table = Table(title=f"{args.model.name}: {len(box_set)} boxes, {format_ms(model.duration)}")
    table.add_column("Function", style="cyan")
    table.add_column("Location")
    table.add_column("Depth", justify="right")
    table.add_column("Self", justify="right")
    table.add_column("Aggregate", justify="right")
    table.add_column("Width", justify="right")
    for box in hottest:
        table.add_row(
            box.text or "(anonymous)",
            location_text(box.frame.location) or "",
            str(box.level),
            format_ms(box.frame.self_time),
            format_ms(box.frame.aggregate_time),
            f"{(box.x2 - box.x1) * 100:.1f}%",
        )

    Console().print(table)
    return 0


def flamecanvas_command(args: argparse.Namespace) -> int:
    """Execute a flamecanvas command.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments

    Returns
    -------
    int
        Exit code (0 for success, 1 for error)
    """
    from flamecanvas.config import ValidationError

    try:
        if args.subcommand == "render":
            return _render(args)
        if args.subcommand == "inspect":
            return _inspect(args)
        if args.subcommand == "formats":
            ConfigValidator.print_output_formats()
            return 0
        logger.error(f"Unknown command '{args.subcommand}'")
        return 1

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1

    except ValidationError as e:
        logger.error(f"Invalid option:\n{e}")
        return 1

    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Entry point for the flamecanvas script."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)
    return flamecanvas_command(args)


if __name__ == "__main__":
    sys.exit(main())
