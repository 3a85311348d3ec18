"""
ir.py — Intermediate Representation for struct2type

This module defines the IR layer that sits between parsing and code generation.
The parser adapter produces it from Go source; the type mapper and struct
translator consume it read-only.

The IR consists of:
  - A closed set of type expressions (a discriminated union)
  - Field and struct declarations, in source order
  - The emitted TypeScript side: interfaces and their members
  - ConverterConfig, the immutable lookup tables shared by the pipeline
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union


# ---------------------------------------------------------------------------
# Type expressions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Primitive:
    """A Go predeclared type, e.g. "int64" or "string"."""

    name: str


@dataclass(frozen=True)
class Array:
    """A slice or fixed-length array."""

    element: "TypeExpression"


@dataclass(frozen=True)
class Map:
    """A map[key]value type."""

    key: "TypeExpression"
    value: "TypeExpression"


@dataclass(frozen=True)
class Pointer:
    """A *T type."""

    inner: "TypeExpression"


@dataclass(frozen=True)
class Named:
    """A reference to a declared type, possibly package-qualified ("time.Time")."""

    identifier: str

    @property
    def local_name(self) -> str:
        """The identifier without its package qualifier."""
        return self.identifier.rpartition(".")[2]


@dataclass(frozen=True)
class Unsupported:
    """
    A type with no structural TypeScript counterpart: channels, funcs,
    interfaces, anonymous structs, generic instantiations.
    """

    spelling: str  # original Go spelling, kept for --emit-ir


# TypeExpression is a discriminated union of all type variants
TypeExpression = Union[Primitive, Array, Map, Pointer, Named, Unsupported]


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldDeclaration:
    """One struct member. ``name`` is None for embedded fields."""

    name: Optional[str]
    type: TypeExpression
    tag: Optional[str] = None  # unquoted tag contents, e.g. 'json:"id,omitempty"'

    @property
    def is_embedded(self) -> bool:
        return self.name is None


@dataclass(frozen=True)
class StructDeclaration:
    """A top-level `type X struct { ... }`."""

    name: str
    fields: Tuple[FieldDeclaration, ...] = ()


# ---------------------------------------------------------------------------
# Emitted TypeScript
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EmittedField:
    """A member line of an interface: `name: type;`"""

    name: str
    type: str


@dataclass(frozen=True)
class TargetInterface:
    """One emitted `interface Name { ... }` block."""

    name: str
    members: Tuple[EmittedField, ...] = ()


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

# Go spellings looked up for Primitive and Named types. "time.Time" is reached
# through Named; "[]byte" only as a literal Primitive("[]byte").
DEFAULT_PRIMITIVE_TYPES: Mapping[str, str] = MappingProxyType(
    {
        # --- text ---
        "string": "string",
        # --- integers ---
        "int": "number",
        "int8": "number",
        "int16": "number",
        "int32": "number",
        "int64": "number",
        "uint": "number",
        "uint8": "number",
        "uint16": "number",
        "uint32": "number",
        "uint64": "number",
        # --- floating point ---
        "float32": "number",
        "float64": "number",
        # --- boolean ---
        "bool": "boolean",
        # --- encoded as strings by encoding/json ---
        "[]byte": "string",
        "time.Time": "string",
    }
)

# Names the IR builder classifies as Primitive rather than Named.
GO_PREDECLARED_TYPES = frozenset(
    {
        "bool",
        "byte",
        "complex64",
        "complex128",
        "error",
        "float32",
        "float64",
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "rune",
        "string",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "uintptr",
        "any",
    }
)


@dataclass(frozen=True)
class ConverterConfig:
    """
    Immutable settings shared by the type mapper and struct translator.

    Fields
    ------
    primitive_types   : Go spelling -> TypeScript type
    tag_key           : struct tag key holding the serialized name
    fallback_type     : emitted for types with no mapping
    embedded_name     : member name for embedded fields with no usable identifier
    """

    primitive_types: Mapping[str, str] = field(
        default_factory=lambda: DEFAULT_PRIMITIVE_TYPES
    )
    tag_key: str = "json"
    fallback_type: str = "any"
    embedded_name: str = "embedded"

    def __post_init__(self):
        # Callers may pass a plain dict; freeze it so the table can't drift
        if not isinstance(self.primitive_types, MappingProxyType):
            object.__setattr__(
                self, "primitive_types", MappingProxyType(dict(self.primitive_types))
            )
