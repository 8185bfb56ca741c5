"""cscaffold command-line entry point.

Usage::

    cscaffold --name demo --language CPP
    cscaffold -n demo -l C -o ./projects
    cscaffold                       # prompts for name and language

Exit status is 0 on success, 1 on invalid input, an existing project folder
or any write failure, and 130 when a prompt is cancelled.
"""

from __future__ import annotations

import argparse
import sys
from functools import partial
from pathlib import Path

from cscaffold import __version__
from cscaffold.config import Settings
from cscaffold.errors import MaterializeError, PromptAborted, ScaffoldError
from cscaffold.resolver import RawInput, resolve_input
from cscaffold.scaffolder import ProjectGenerator
from cscaffold.utils import (
    print_created,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cscaffold",
        description="Scaffold a minimal CMake project for C or C++",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  cscaffold --name demo --language CPP\n"
            "  cscaffold -n demo -l C -o ./projects\n"
            "  cscaffold\n"
        ),
    )
    parser.add_argument(
        "--name", "-n",
        default=None,
        help="Project name",
    )
    parser.add_argument(
        "--language", "-l",
        default=None,
        help="C or CPP",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the project folder is created in (default: current directory)",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List every created path",
    )
    output.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print errors",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``cscaffold`` and ``python -m cscaffold``."""
    args = build_parser().parse_args(argv)

    settings = Settings.from_env()
    if args.output:
        settings = settings.model_copy(update={"output_dir": Path(args.output)})

    try:
        config = resolve_input(RawInput(name=args.name, language=args.language), settings)
    except PromptAborted:
        print_error("Aborted.")
        sys.exit(130)
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)

    root = settings.output_dir / config.name
    on_created = partial(print_created, root=root) if args.verbose else None
    generator = ProjectGenerator(config, settings, on_created=on_created)

    try:
        root = generator.generate()
    except MaterializeError as exc:
        print_error(str(exc))
        if args.verbose:
            print_warning(f"Failed at {exc.path}")
        if exc.rollback_error is not None:
            print_warning(
                f"Could not remove {root} after the {exc.step} failed: {exc.rollback_error}"
            )
        sys.exit(1)
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)

    if args.quiet:
        return

    print_success(f'Project "{config.name}" created.')
    print_summary_table(
        {
            "Project": config.name,
            "Language": config.language.value,
            "Location": str(root),
            "Source": f"src/main{config.source_extension}",
            "Next step": f"cd {root} && ./build.sh",
        },
        title="cscaffold",
    )


if __name__ == "__main__":
    main()
