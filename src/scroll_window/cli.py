"""
scroll-window CLI - Entry point

Runs the estimator against a simulated list host, opens the interactive
terminal viewer, or writes the default configuration.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from loguru import logger
from rich.console import Console
from rich.table import Table

from scroll_window.core.config import (
    Config,
    create_default_config,
    get_config_path,
    load_config,
)
from scroll_window.core.output import log, setup_loguru
from scroll_window.domain.simulation import Frame, SimulatedHost, random_heights

# Scroll positions visited by `simulate` when none are given, as fractions of
# the scrollable height estimated after the first settle at the top
DEFAULT_SCROLL_FRACTIONS = (0.25, 0.5, 0.75, 1.0)


def build_frames_table(frames: list[Frame]) -> Table:
    """Render simulated round trips as a Rich table."""
    table = Table(title="Estimator frames")
    table.add_column("scroll_top", justify="right")
    table.add_column("pass", justify="right")
    table.add_column("result")
    table.add_column("avg row", justify="right")
    table.add_column("target", justify="right")
    table.add_column("top ph", justify="right")
    table.add_column("middle", justify="right")
    table.add_column("middle ph", justify="right")
    table.add_column("last", justify="right")
    table.add_column("rendered", justify="right")

    for frame in frames:
        state = frame.result.state
        if frame.result.complete:
            result = "[green]complete[/green]"
        else:
            result = f"[yellow]partial @{frame.result.missing_item}[/yellow]"
        table.add_row(
            f"{frame.scroll_top:.0f}",
            str(frame.render_pass),
            result,
            f"{state.average_row_height:.2f}",
            f"{state.target_height:.0f}",
            f"{state.top_placeholder_height:.0f}",
            f"{state.first_middle_item}+{state.middle_item_count}",
            f"{state.middle_placeholder_height:.0f}",
            str(state.last_item_count),
            str(frame.rendered_count),
        )
    return table


def run_simulate(config: Config, scroll_positions: Optional[list[float]] = None) -> int:
    """Drive a simulated host through a sequence of scroll events.

    Args:
        config: Loaded configuration (estimator + simulation sections)
        scroll_positions: Pixel offsets to visit; defaults to fractions of the
            estimated scrollable height

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    simulation = config.simulation
    min_row_height = config.estimator.min_row_height

    try:
        heights = random_heights(
            simulation.total_items,
            min_row_height,
            simulation.max_row_height,
            seed=simulation.seed,
        )
        host = SimulatedHost(
            heights,
            min_row_height=min_row_height,
            viewport_height=simulation.viewport_height,
            max_render_passes=simulation.max_render_passes,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    frames = host.scroll_to(0)
    if scroll_positions is None:
        scrollable = max(0.0, host.state.target_height - simulation.viewport_height)
        scroll_positions = [scrollable * f for f in DEFAULT_SCROLL_FRACTIONS]

    for scroll_top in scroll_positions:
        if scroll_top < 0:
            print(f"Error: scroll position must be >= 0, got {scroll_top}", file=sys.stderr)
            return 1
        frames.extend(host.scroll_to(scroll_top))

    console = Console()
    console.print(build_frames_table(frames))
    partial = sum(1 for frame in frames if not frame.result.complete)
    console.print(
        f"{len(frames)} passes over {len(scroll_positions) + 1} scroll events, "
        f"{partial} partial; final average row height "
        f"{host.state.average_row_height:.2f}px",
        style="bold",
    )
    return 0


def run_init_config(force: bool = False) -> int:
    """Write the default configuration file.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    config_path = get_config_path()
    if config_path.exists() and not force:
        print(
            f"Configuration already exists at: {config_path} (use --force to overwrite)",
            file=sys.stderr,
        )
        return 1

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(create_default_config() + "\n", encoding="utf-8")
    except OSError as e:
        print(f"Error writing configuration to {config_path}: {e}", file=sys.stderr)
        return 1

    log(f"Wrote default configuration to: {config_path}")
    return 0


def _apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Apply command line options on top of the loaded configuration."""
    if getattr(args, "min_row", None) is not None:
        config.estimator.min_row_height = args.min_row
    if getattr(args, "items", None) is not None:
        config.simulation.total_items = args.items
        config.viewer.total_items = args.items
    if getattr(args, "viewport", None) is not None:
        config.simulation.viewport_height = args.viewport
    if getattr(args, "max_row", None) is not None:
        config.simulation.max_row_height = args.max_row
    if getattr(args, "seed", None) is not None:
        config.simulation.seed = args.seed
        config.viewer.seed = args.seed

    config.estimator.validate()
    config.simulation.validate()
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scroll-window",
        description="scroll-window - Virtual scroll window estimation for variable-height lists",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config.toml (default: project root, cwd, then XDG config dir)",
    )

    subparsers = parser.add_subparsers(dest="subcommand", help="Available commands")

    simulate_parser = subparsers.add_parser(
        "simulate", help="Run the estimator against a simulated list"
    )
    simulate_parser.add_argument("--items", type=int, help="Number of rows")
    simulate_parser.add_argument("--viewport", type=float, help="Viewport height in px")
    simulate_parser.add_argument("--min-row", type=float, help="Minimum row height in px")
    simulate_parser.add_argument("--max-row", type=float, help="Maximum row height in px")
    simulate_parser.add_argument("--seed", type=int, help="Seed for the row heights")
    simulate_parser.add_argument(
        "--scroll",
        type=float,
        action="append",
        help="Scroll offset in px to visit (repeatable)",
    )

    view_parser = subparsers.add_parser("view", help="Open the interactive terminal viewer")
    view_parser.add_argument("--items", type=int, help="Number of rows")
    view_parser.add_argument("--seed", type=int, help="Seed for the row texts")

    init_parser = subparsers.add_parser("init-config", help="Write the default config file")
    init_parser.add_argument(
        "--force", action="store_true", help="Overwrite an existing config file"
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the scroll-window command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.subcommand:
        parser.print_help()
        return 1

    if args.subcommand == "init-config":
        # No config file to read the logging section from yet
        setup_loguru()
        return run_init_config(force=args.force)

    config = load_config(args.config)
    log_file = Path(config.logging.log_file) if config.logging.log_file else None
    setup_loguru(
        log_file,
        level=config.logging.level,
        console_output=config.logging.console_output,
    )

    try:
        config = _apply_overrides(config, args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.subcommand == "simulate":
        return run_simulate(config, args.scroll)

    if args.subcommand == "view":
        from scroll_window.ui.blessed import run_viewer

        try:
            return run_viewer(config)
        except Exception:
            logger.exception("Viewer failed")
            print("Viewer failed; see the log file for details", file=sys.stderr)
            return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
