"""
parser.py — Parse Go source with tree-sitter.

WHY TREE-SITTER:
Go's own go/ast isn't available from Python, and struct declarations have
enough corner cases (grouped type blocks, embedded pointers, raw vs.
interpreted tag literals, comments between fields) that a regex would
mis-parse them.  tree-sitter-go gives us a concrete syntax tree of the whole
file, with error nodes where the source doesn't parse.

This module only runs the parser and reports syntax errors.  Turning the
tree into IR is ir_builder.py's job.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

GO_LANGUAGE = Language(tree_sitter_go.language())


class GoParseError(Exception):
    """The Go source has syntax errors. Raised before any conversion runs."""

    def __init__(self, filename: str, line: int, column: int, message: str):
        self.filename = filename
        self.line = line
        self.column = column
        self.message = message
        super().__init__(f"parse error: {filename}:{line}:{column}: {message}")


@dataclass
class GoSourceTree:
    """A successfully parsed Go file."""

    filename: str
    source: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node


# Complete top-level declarations tree-sitter may keep inside an ERROR node
_WELL_FORMED = frozenset(
    {
        "package_clause",
        "import_declaration",
        "type_declaration",
        "function_declaration",
        "method_declaration",
        "var_declaration",
        "const_declaration",
        "comment",
    }
)


def _first_error(node: Node) -> Optional[Node]:
    """
    Depth-first search for the innermost ERROR or MISSING node.

    tree-sitter can wrap a whole file in one ERROR node, so an ERROR is
    only reported as-is when none of its children pins the problem down.
    """
    if node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    if node.is_error:
        for child in node.children:
            if child.has_error or child.type in _WELL_FORMED:
                continue
            if child.text.strip() in (b"", b";"):
                continue
            return child
        return node
    return None


def _describe_error(node: Node, source: bytes) -> str:
    if node.is_missing:
        return f"expected {node.type!r}"
    snippet = source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")
    snippet = snippet.strip().splitlines()[0] if snippet.strip() else ""
    if snippet:
        return f"unexpected {snippet[:40]!r}"
    return "syntax error"


def parse_source(
    source: Union[str, bytes], filename: str = "<source>"
) -> GoSourceTree:
    """
    Parse Go source text.

    Parameters
    ----------
    source   : the file contents
    filename : used in error messages only

    Raises
    ------
    GoParseError if tree-sitter reports any syntax error.
    """
    if isinstance(source, str):
        source = source.encode("utf-8")

    parser = Parser(GO_LANGUAGE)
    tree = parser.parse(source)

    if tree.root_node.has_error:
        bad = _first_error(tree.root_node) or tree.root_node
        row, column = bad.start_point
        raise GoParseError(filename, row + 1, column + 1, _describe_error(bad, source))

    return GoSourceTree(filename=filename, source=source, tree=tree)


def parse_file(path: Union[str, Path]) -> GoSourceTree:
    """Read and parse a .go file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Go source not found: {path}")
    return parse_source(path.read_bytes(), filename=str(path))
