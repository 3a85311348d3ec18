"""
codegen.py — Render TypeScript interfaces.

Output format:

    interface Person {
      name: string;
      address: Address;
    }

Blocks are separated by exactly one blank line, in the order the structs
appear in the source.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from .ir import ConverterConfig, StructDeclaration, TargetInterface
from .ir_builder import IRBuilder
from .parser import parse_file, parse_source
from .translator import StructTranslator

INDENT = "  "
BLOCK_SEPARATOR = "\n\n"


def render_interface(iface: TargetInterface) -> str:
    lines = [f"interface {iface.name} {{"]
    for member in iface.members:
        lines.append(f"{INDENT}{member.name}: {member.type};")
    lines.append("}")
    return "\n".join(lines)


class CodeGenerator:
    """Turns StructDeclarations into the final TypeScript text."""

    def __init__(self, translator: Optional[StructTranslator] = None):
        self.translator = translator or StructTranslator()

    def generate(self, decls: Iterable[StructDeclaration]) -> str:
        interfaces = self.translator.translate_all(decls)
        return BLOCK_SEPARATOR.join(render_interface(iface) for iface in interfaces)


def convert_source(
    source: Union[str, bytes],
    config: Optional[ConverterConfig] = None,
    filename: str = "<source>",
) -> str:
    """Parse Go source and return its structs as TypeScript interfaces."""
    decls = IRBuilder().build(parse_source(source, filename=filename))
    return CodeGenerator(StructTranslator(config)).generate(decls)


def convert_file(
    path: Union[str, Path], config: Optional[ConverterConfig] = None
) -> str:
    """Same as convert_source, reading from a .go file."""
    decls = IRBuilder().build(parse_file(path))
    return CodeGenerator(StructTranslator(config)).generate(decls)


def write_output(text: str, out_path: Union[str, Path]) -> Path:
    """Write generated text to a file and return the path."""
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text, encoding="utf-8")
    return out_path
