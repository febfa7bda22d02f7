"""Build-phase command line.

Renders alias specifications into an ordinary Python module so projects can
check generated types into source control instead of generating them at
import time.

Usage:
    python -m enumizer render aliases.json -o src/app/aliases.py

Spec file format:
    {
      "docstring": "Domain aliases.",
      "aliases": [
        {"family": "option", "type_name": "Lookup", "variants": ["Missing", "Found"]},
        {"family": "result", "type_name": "Response", "variants": ["Ok", "Err"],
         "short_circuit": true}
      ]
    }
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from enumizer.application.generator import render_specifications
from enumizer.core.errors import GenerationError
from enumizer.schemas.spec_schemas import SpecificationDocument


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="enumizer",
        description="Generate Option/Result/Either-shaped aliases.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="render a spec file into a Python module")
    render.add_argument("spec", type=Path, help="JSON specification document")
    render.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="write the module here instead of stdout",
    )
    return parser


def _render(spec_path: Path, output: Path | None) -> int:
    try:
        document = SpecificationDocument.model_validate_json(
            spec_path.read_text(encoding="utf-8")
        )
    except OSError as exc:
        print(f"enumizer: cannot read {spec_path}: {exc}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        print(f"enumizer: invalid specification document {spec_path}:\n{exc}", file=sys.stderr)
        return 1

    try:
        source = render_specifications(document.aliases, docstring=document.docstring)
    except GenerationError as exc:
        print(f"enumizer: {exc}", file=sys.stderr)
        return 1

    if output is None:
        sys.stdout.write(source)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(source, encoding="utf-8")
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Args:
        argv: Arguments without the program name; defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    args = build_parser().parse_args(argv)
    if args.command == "render":
        return _render(args.spec, args.output)
    return 2
