"""
__main__.py — CLI entry point for struct2type.

Usage:
    python -m struct2type path/to/models.go [-o types.ts] [--emit-ir] [-q]

This is the single command that does everything:
  1. Parses the Go file with tree-sitter
  2. Builds the IR (struct declarations only)
  3. Maps Go types to TypeScript and writes the interfaces

The generated TypeScript goes to stdout unless -o is given, so progress
lines are printed to stderr.
"""

import argparse
import sys
from pathlib import Path

from .codegen import CodeGenerator, write_output
from .ir import ConverterConfig
from .ir_builder import IRBuilder
from .ir_printer import print_ir
from .parser import GoParseError, parse_file
from .translator import StructTranslator


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="struct2type",
        description="Convert Go structs to TypeScript interfaces.",
    )
    parser.add_argument(
        "source",
        type=Path,
        help="Path to the Go source file (.go)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file path (default: stdout)",
    )
    parser.add_argument(
        "--emit-ir",
        action="store_true",
        help="Print the intermediate representation to stderr",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    args = parser.parse_args(argv)

    def log(message: str) -> None:
        if not args.quiet:
            print(message, file=sys.stderr)

    source: Path = args.source

    # Step 1: PARSE
    log(f"[1/3] Parsing {source.name} ...")
    try:
        tree = parse_file(source)
    except (FileNotFoundError, GoParseError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    # Step 2: BUILD IR
    log("[2/3] Building IR ...")
    structs = IRBuilder().build(tree)
    log(f"\tFound {len(structs)} struct(s)")
    if args.emit_ir:
        print(print_ir(structs, title=source.name), file=sys.stderr)

    # Step 3: CODEGEN
    log("[3/3] Generating TypeScript ...")
    codegen = CodeGenerator(StructTranslator(ConverterConfig()))
    ts_code = codegen.generate(structs)
    text = ts_code + "\n" if ts_code else ""

    if args.output is None:
        sys.stdout.write(text)
    else:
        out_path = write_output(text, args.output)
        log(f"\tTypeScript interfaces → {out_path}")

    log(f"Done! Generated {len(structs)} interface(s).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
