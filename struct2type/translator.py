"""
translator.py — Translate Go struct declarations into TypeScript interfaces.

For each field the translator decides two things:
  - the member name: the json tag alias if there is one, else the declared
    name, else (embedded fields) the embedded type's name
  - the member type: whatever the TypeMapper says

Fields tagged json:"-" are dropped. Everything else is kept in declaration
order.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .ir import (
    ConverterConfig,
    EmittedField,
    FieldDeclaration,
    Named,
    Primitive,
    StructDeclaration,
    TargetInterface,
    TypeExpression,
)
from .tags import parse_directive
from .type_mapper import TypeMapper


@dataclass(frozen=True)
class ResolvedName:
    """Outcome of name resolution for one field."""

    name: str
    skip: bool = False


class StructTranslator:
    """
    Converts StructDeclarations to TargetInterfaces.

    Holds a TypeMapper built from the same config; no per-call state.
    """

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        type_mapper: Optional[TypeMapper] = None,
    ):
        self.config = config or ConverterConfig()
        self.type_mapper = type_mapper or TypeMapper(self.config)

    def translate(self, decl: StructDeclaration) -> TargetInterface:
        """Translate one struct. Always returns an interface, possibly empty."""
        members: List[EmittedField] = []
        for fld in decl.fields:
            member = self.translate_field(fld)
            if member is not None:
                members.append(member)
        return TargetInterface(name=decl.name, members=tuple(members))

    def translate_all(
        self, decls: Iterable[StructDeclaration]
    ) -> List[TargetInterface]:
        return [self.translate(decl) for decl in decls]

    def translate_field(self, fld: FieldDeclaration) -> Optional[EmittedField]:
        """Map a single field, or return None if its tag excludes it."""
        resolved = self.resolve_name(fld)
        if resolved.skip:
            return None
        return EmittedField(
            name=resolved.name, type=self.type_mapper.map_type(fld.type)
        )

    def resolve_name(self, fld: FieldDeclaration) -> ResolvedName:
        """
        Work out the emitted member name.

        The tag is consulted last so an alias overrides both declared and
        embedded names. Options after the alias (omitempty, string) have no
        effect on the output.
        """
        if fld.is_embedded:
            name = self.embedded_name(fld.type)
        else:
            name = fld.name

        directive = parse_directive(fld.tag, self.config.tag_key)
        if directive is None:
            return ResolvedName(name)
        if directive.skip:
            return ResolvedName(name, skip=True)
        return ResolvedName(directive.alias or name)

    def embedded_name(self, expr: TypeExpression) -> str:
        """
        Name an embedded field after its type.

        e.g. Base -> "Base", models.Base -> "Base". Anything else (pointer
        embeds included) gets the configured placeholder.
        """
        if isinstance(expr, Named) and expr.local_name:
            return expr.local_name
        if isinstance(expr, Primitive):
            return expr.name
        return self.config.embedded_name
