import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

import pydantic
import yaml

from trackademic.config import AppConfig, load_config
from trackademic.editor.control import ControlRef, TextArea
from trackademic.editor.formatter import TextFormatter
from trackademic.editor.toolbar import COMMANDS, run_command
from trackademic.errors import TrackademicError, ValidationError
from trackademic.logging import enable_error_log, get_logger, set_log_level
from trackademic.model.solution import SolveMathOutput
from trackademic.solver.solve_math_flow import SolveMathFlow
from trackademic.utils import read_file, write_file

logger = get_logger("cli")


def _load_app_config(path: Optional[str]) -> AppConfig:
    try:
        cfg = load_config(path) if path else AppConfig()
    except (OSError, yaml.YAMLError, pydantic.ValidationError) as e:
        raise ValidationError(f"Invalid configuration {path}: {e}") from e
    if cfg.logging.level != "INFO":
        set_log_level(cfg.logging.level)
    if cfg.logging.error_log_dir:
        enable_error_log(cfg.logging.error_log_dir)
    return cfg


async def _read_input(path: Path) -> str:
    try:
        content = await read_file(path)
    except OSError as e:
        raise ValidationError(f"Could not read {path}: {e}") from e
    if content is None:
        raise ValidationError(f"Could not decode {path}")
    return content


def render_solution(output: SolveMathOutput) -> str:
    lines = [f"Solution: {output.solution}"]
    if output.steps:
        lines.append("Steps:")
        lines.extend(f"  {number}. {step}" for number, step in enumerate(output.steps, start=1))
    return "\n".join(lines)


async def solve(args: argparse.Namespace) -> int:
    cfg = _load_app_config(args.config)

    equation = args.equation
    if args.file:
        equation = await _read_input(Path(args.file))
    if not equation:
        raise ValidationError("Provide an equation or --file")

    flow = SolveMathFlow(cfg.solver)
    output = await flow(equation.strip())
    print(render_solution(output))
    return 0


async def format_file(args: argparse.Namespace) -> int:
    _load_app_config(args.config)
    path = Path(args.path)
    content = await _read_input(path)

    end = args.start if args.end is None else args.end
    text_area = TextArea(content, args.start, end)
    formatter = TextFormatter(ControlRef(text_area), text_area.set_content)
    run_command(formatter, args.command)

    if args.in_place:
        await write_file(path, text_area.value)
        logger.info(f"Applied {args.command} to {path}")
    else:
        sys.stdout.write(text_area.value)
        if not text_area.value.endswith("\n"):
            sys.stdout.write("\n")
    print(f"selection: {text_area.selection_start} {text_area.selection_end}", file=sys.stderr)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog = "trackademic")
    subparsers = parser.add_subparsers(dest = "command_name")

    solve_parser = subparsers.add_parser("solve", help = "Solve a math problem step by step")
    solve_parser.add_argument("equation", nargs = "?", help = "Problem statement, e.g. '2x + 5 = 15'")
    solve_parser.add_argument("--file", "-f", help = "Read the problem from a text file")
    solve_parser.add_argument("--config", "-c", help = "YAML configuration file")

    format_parser = subparsers.add_parser("format", help = "Apply an editor toolbar command to a text file")
    format_parser.add_argument("path", help = "Text file to format")
    format_parser.add_argument("--command", required = True, choices = sorted(COMMANDS))
    format_parser.add_argument("--start", type = int, default = 0, help = "Selection start offset")
    format_parser.add_argument("--end", type = int, help = "Selection end offset (defaults to start)")
    format_parser.add_argument("--in-place", action = "store_true", help = "Write the result back to the file")
    format_parser.add_argument("--config", "-c", help = "YAML configuration file")

    return parser


def cli(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    handlers = {
        "solve": solve,
        "format": format_file,
    }
    if args.command_name not in handlers:
        parser.print_help()
        return 1

    try:
        return asyncio.run(handlers[args.command_name](args))
    except TrackademicError as e:
        logger.error(f"{args.command_name} failed: {e}")
        return 1


def main():
    """entry point for the trackademic command"""
    sys.exit(cli())
