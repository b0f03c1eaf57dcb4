"""Command-line entry point for the DDD module generator.

Usage::

    python -m modgen -name order -cn Order
    modgen -name order_item -cn "Order Item" -module github.com/acme/shop
    modgen -name order --root ../shop-service

Exit status is 0 on success, including runs where a registration step could
not be applied (those are reported as warnings on stderr), and 1 when the
module name is missing or any file could not be generated.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from .config import GeneratorConfig
from .errors import GeneratorError, UsageError
from .generator import ModuleGenerator
from .models import ModuleSpec
from .utils import console, print_error, print_success, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modgen",
        description="Generate a DDD CRUD module and register it in the router and container",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  modgen -name order -cn Order\n"
            "  modgen -name order_item -cn 'Order Item' --root ./service\n"
        ),
    )
    parser.add_argument(
        "-name", "--name",
        dest="name",
        default="",
        help="Module name, lowercase (e.g. order)",
    )
    parser.add_argument(
        "-cn", "--cn",
        dest="display_name",
        default="",
        help="Display name used in generated comments (default: the module name)",
    )
    parser.add_argument(
        "-module", "--module",
        dest="module_path",
        default="",
        help="Go module path (default: auto-detected from go.mod)",
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Project root directory (default: current directory)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file overriding paths and markers",
    )
    return parser


def load_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build the configuration from ``--config`` or the environment, then apply ``--root``."""
    if args.config:
        try:
            config = GeneratorConfig.load(Path(args.config))
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            raise UsageError(f"cannot load config {args.config}: {exc}", args.config) from exc
    else:
        config = GeneratorConfig.from_env()
    if args.root:
        config = config.model_copy(update={"project_root": Path(args.root)})
    return config


def run(args: argparse.Namespace) -> int:
    """Execute one generation run and return the process exit status."""
    name = args.name.strip()
    if not name:
        raise UsageError("-name is required")

    config = load_config(args)
    spec = ModuleSpec(
        raw_name=name,
        display_name=args.display_name.strip(),
        module_path=args.module_path.strip() or config.detect_module_path(),
    )

    console.print(
        f"Generating DDD module: [bold]{escape(spec.pascal_name)}[/bold] "
        f"({escape(spec.display_name)})"
    )

    generator = ModuleGenerator(config)
    try:
        report = generator.generate(spec)
    except GeneratorError as exc:
        target = exc.path if exc.path is not None else spec.name
        print_error(f"failed to generate {escape(str(target))}: {escape(str(exc))}")
        return 1

    console.print()
    print_summary_table(report)
    print_success(f"Module {escape(spec.pascal_name)} generated!")
    console.print()
    console.print("Next steps:")
    console.print(
        f"  1. Edit internal/domain/{escape(spec.snake_name)}/entity.go - "
        "add domain fields and business methods"
    )
    console.print(
        f"  2. Edit internal/application/service/{escape(spec.snake_name)}_service.go - "
        "implement business orchestration"
    )
    console.print("  3. Run make docs - update Swagger documentation")
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``modgen`` / ``python -m modgen``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return run(args)
    except UsageError as exc:
        print_error(f"error: {escape(str(exc))}")
        print_error("usage: modgen -name order -cn Order")
        return 1


if __name__ == "__main__":
    sys.exit(main())
