"""
ir_builder.py — Build IR from the tree-sitter Go syntax tree

This module converts the tree-sitter specific parser output (GoSourceTree)
into the language-agnostic IR. It:
  - Finds top-level struct type declarations, single and grouped
  - Converts each field's type node into a TypeExpression
  - Unquotes struct tags
  - Expands `X, Y int` into one FieldDeclaration per name

Non-struct declarations (interfaces, aliases, named basic types) are skipped.
"""

import json
from typing import List, Optional

from tree_sitter import Node

from .ir import (
    GO_PREDECLARED_TYPES,
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
from .parser import GoSourceTree


def _text(node: Node) -> str:
    return node.text.decode("utf-8")


def unquote_tag(literal: str) -> str:
    """
    Strip the quotes off a tag literal.

    `json:"id"`       -> json:"id"
    "json:\\"id\\""   -> json:"id"
    """
    if len(literal) >= 2 and literal[0] == literal[-1] == "`":
        return literal[1:-1].replace("\r", "")
    if len(literal) >= 2 and literal[0] == literal[-1] == '"':
        try:
            value = json.loads(literal)
        except ValueError:
            return literal[1:-1]
        if isinstance(value, str):
            return value
        return literal[1:-1]
    return literal


class IRBuilder:
    """
    Converts a parsed Go file to IR.

    Strategy:
      1. Visit top-level type_declaration nodes, in source order
      2. Keep the type_specs whose type is a struct_type
      3. Convert each field_declaration to FieldDeclarations
    """

    def build(self, source_tree: GoSourceTree) -> List[StructDeclaration]:
        """
        Build the struct list for a parsed file.

        Parameters
        ----------
        source_tree : The parsed Go file from parser.py

        Returns
        -------
        StructDeclarations in the order they appear in the source
        """
        structs: List[StructDeclaration] = []
        for decl in source_tree.root.named_children:
            if decl.type != "type_declaration":
                continue
            for spec in decl.named_children:
                if spec.type != "type_spec":
                    continue
                struct = self._convert_type_spec(spec)
                if struct is not None:
                    structs.append(struct)
        return structs

    def _convert_type_spec(self, spec: Node) -> Optional[StructDeclaration]:
        name_node = spec.child_by_field_name("name")
        type_node = spec.child_by_field_name("type")
        if name_node is None or type_node is None or type_node.type != "struct_type":
            return None

        fields: List[FieldDeclaration] = []
        for field_list in type_node.named_children:
            if field_list.type != "field_declaration_list":
                continue
            for field_decl in field_list.named_children:
                if field_decl.type == "field_declaration":
                    fields.extend(self._convert_field(field_decl))

        return StructDeclaration(name=_text(name_node), fields=tuple(fields))

    def _convert_field(self, node: Node) -> List[FieldDeclaration]:
        type_node = node.child_by_field_name("type")
        if type_node is None:
            return []
        field_type = self.convert_type(type_node)

        tag_node = node.child_by_field_name("tag")
        tag = unquote_tag(_text(tag_node)) if tag_node is not None else None

        names = node.children_by_field_name("name")
        if not names:
            # Embedded: `Base` or `*Base`; the star is a sibling token here
            if any(child.type == "*" for child in node.children):
                field_type = Pointer(field_type)
            return [FieldDeclaration(name=None, type=field_type, tag=tag)]

        return [
            FieldDeclaration(name=_text(name), type=field_type, tag=tag)
            for name in names
        ]

    def convert_type(self, node: Node) -> TypeExpression:
        """Convert a tree-sitter type node to a TypeExpression."""
        kind = node.type

        if kind == "type_identifier":
            name = _text(node)
            if name in GO_PREDECLARED_TYPES:
                return Primitive(name)
            return Named(name)

        if kind == "qualified_type":
            package = node.child_by_field_name("package")
            name = node.child_by_field_name("name")
            if package is not None and name is not None:
                return Named(f"{_text(package)}.{_text(name)}")
            return Named("".join(_text(node).split()))

        if kind == "pointer_type":
            return Pointer(self._convert_only_child(node))

        if kind in ("slice_type", "array_type"):
            element = node.child_by_field_name("element")
            if element is None:
                return Unsupported(_text(node))
            return Array(self.convert_type(element))

        if kind == "map_type":
            key = node.child_by_field_name("key")
            value = node.child_by_field_name("value")
            if key is None or value is None:
                return Unsupported(_text(node))
            return Map(self.convert_type(key), self.convert_type(value))

        if kind == "parenthesized_type":
            return self._convert_only_child(node)

        # channel_type, function_type, interface_type, struct_type,
        # generic_type, negated_type, ...
        return Unsupported(_text(node))

    def _convert_only_child(self, node: Node) -> TypeExpression:
        children = [c for c in node.named_children if c.type != "comment"]
        if not children:
            return Unsupported(_text(node))
        return self.convert_type(children[0])
