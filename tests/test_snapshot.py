"""
Snapshot tests for struct2type.

For every .go file in tests/sources/, we run the full pipeline and compare
the generated TypeScript against the golden file tests/expected/<stem>.ts.

To add a new test:  drop a Go file in tests/sources/ and the expected output
in tests/expected/<stem>.ts.

To update golden files after an intentional change:
    UPDATE_EXPECTED=1 pytest tests/test_snapshot.py
"""

import difflib
import os
from pathlib import Path

import pytest

from struct2type.codegen import CodeGenerator
from struct2type.ir import ConverterConfig
from struct2type.ir_builder import IRBuilder
from struct2type.parser import parse_file
from struct2type.translator import StructTranslator

TESTS_DIR = Path(__file__).resolve().parent
SOURCES_DIR = TESTS_DIR / "sources"
EXPECTED_DIR = TESTS_DIR / "expected"


def _run_struct2type(source: Path) -> str:
    """Run the full parse -> IR -> translate -> render pipeline, as the CLI writes it."""
    # Step 1: Parse
    tree = parse_file(source)

    # Step 2: Build IR
    structs = IRBuilder().build(tree)

    # Step 3: Generate code
    codegen = CodeGenerator(StructTranslator(ConverterConfig()))
    ts_code = codegen.generate(structs)
    return ts_code + "\n" if ts_code else ""


def _unified_diff(expected: str, actual: str, filename: str) -> str:
    """Return a unified diff string, or empty if identical."""
    if expected == actual:
        return ""
    diff_lines = difflib.unified_diff(
        expected.splitlines(keepends=True),
        actual.splitlines(keepends=True),
        fromfile=f"expected/{filename}",
        tofile=f"actual/{filename}",
    )
    return "".join(diff_lines)


# Discover all test sources
_sources = sorted(SOURCES_DIR.glob("*.go")) if SOURCES_DIR.exists() else []


@pytest.mark.parametrize(
    "source",
    _sources,
    ids=[s.stem for s in _sources],
)
def test_snapshot(source: Path):
    """Run struct2type on a Go file and compare output to its golden file."""
    expected_file = EXPECTED_DIR / f"{source.stem}.ts"
    update = os.environ.get("UPDATE_EXPECTED", "") == "1"

    generated = _run_struct2type(source)

    if update:
        EXPECTED_DIR.mkdir(parents=True, exist_ok=True)
        expected_file.write_text(generated, encoding="utf-8")
        return

    assert expected_file.exists(), (
        f"Missing expected file: {expected_file}\n"
        f"Run with UPDATE_EXPECTED=1 to create it."
    )

    diff = _unified_diff(expected_file.read_text(encoding="utf-8"), generated, expected_file.name)
    if diff:
        pytest.fail(
            f"Snapshot mismatch for {source.name}:\n\n{diff}\n\n"
            f"Run with UPDATE_EXPECTED=1 to update golden files."
        )
