"""
type_mapper.py — Map IR types to TypeScript type expressions

This module decides what TypeScript type each Go type becomes.
It handles:
  - Primitive type mappings (integers, floats, bool, string)
  - Slices/arrays, maps and pointers, recursively
  - References to other structs (passed through by name)
  - A fallback token for everything else

Mapping is total: there is no None result and nothing raises.
"""

from typing import Optional

from .ir import (
    Array,
    ConverterConfig,
    Map,
    Named,
    Pointer,
    Primitive,
    TypeExpression,
)


class TypeMapper:
    """
    Maps IR types to TypeScript equivalents.

    The only state is the config's primitive table, which is never mutated,
    so one mapper can be shared freely.
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config or ConverterConfig()

    def map_type(self, expr: TypeExpression) -> str:
        """
        Map an IR type to its TypeScript spelling.

        Parameters
        ----------
        expr : The IR type to map

        Returns
        -------
        The TypeScript type, e.g. "number", "Item[]", "Record<string, any>"
        """
        # Pointers carry no optionality marker; *T is emitted as T
        if isinstance(expr, Pointer):
            return self.map_type(expr.inner)

        if isinstance(expr, Primitive):
            return self._lookup(expr.name)

        if isinstance(expr, Array):
            return f"{self.map_type(expr.element)}[]"

        if isinstance(expr, Map):
            key = self.map_type(expr.key)
            value = self.map_type(expr.value)
            return f"Record<{key}, {value}>"

        if isinstance(expr, Named):
            return self._lookup(expr.identifier)

        # Unsupported, or a shape this mapper doesn't know
        return self.config.fallback_type

    def _lookup(self, name: str) -> str:
        """Table hit, or the name itself as a reference to another interface."""
        return self.config.primitive_types.get(name, name)

