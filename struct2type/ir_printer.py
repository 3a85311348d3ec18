"""
ir_printer.py — Pretty-print IR for debugging

This utility provides human-readable output of the IR structure.
Useful for:
  - Debugging the IR builder against odd Go source
  - Seeing which fields came out embedded, tagged or unsupported
  - Implementing the --emit-ir flag
"""

from typing import List, Sequence

from .ir import (
    Array,
    FieldDeclaration,
    Map,
    Named,
    Pointer,
    Primitive,
    StructDeclaration,
    TypeExpression,
    Unsupported,
)


class IRPrinter:
    """
    Pretty-prints IR to text format.

    Output format:
      Struct(name="Person")
        Field("Name", Primitive(string), tag='json:"name"')
        Field(<embedded>, Named(Base))
    """

    def __init__(self, structs: Sequence[StructDeclaration], title: str = "<source>"):
        self.structs = structs
        self.title = title

    def print_all(self) -> str:
        """Print entire IR to string."""
        lines: List[str] = []

        lines.append("=" * 70)
        lines.append(f"IR for {self.title}")
        lines.append("=" * 70)

        if not self.structs:
            lines.append("  (no structs)")
        for struct in self.structs:
            lines.append(f'Struct(name="{struct.name}")')
            for fld in struct.fields:
                lines.append(self._format_field(fld))
        lines.append("")

        return "\n".join(lines)

    def _format_field(self, fld: FieldDeclaration) -> str:
        name = "<embedded>" if fld.is_embedded else f'"{fld.name}"'
        tag = f", tag={fld.tag!r}" if fld.tag is not None else ""
        return f"  Field({name}, {format_type(fld.type)}{tag})"


def format_type(expr: TypeExpression) -> str:
    """Format a TypeExpression for display."""
    if isinstance(expr, Primitive):
        return f"Primitive({expr.name})"
    elif isinstance(expr, Named):
        return f"Named({expr.identifier})"
    elif isinstance(expr, Pointer):
        return f"Pointer({format_type(expr.inner)})"
    elif isinstance(expr, Array):
        return f"Array({format_type(expr.element)})"
    elif isinstance(expr, Map):
        return f"Map({format_type(expr.key)}, {format_type(expr.value)})"
    elif isinstance(expr, Unsupported):
        return f"Unsupported({expr.spelling!r})"
    else:
        return f"{type(expr).__name__}(...)"


def print_ir(structs: Sequence[StructDeclaration], title: str = "<source>") -> str:
    """Convenience function to print a struct list."""
    printer = IRPrinter(structs, title)
    return printer.print_all()
