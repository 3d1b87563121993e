"""
Type Descriptor Resolver

Converts tree-sitter type nodes into an explicit TypeExpr sum type and
classifies it into a TypeDescriptor (rendering, base type, array and
nullability flags) by recursive descent over the tag.

Recognized shapes: simple names, package-qualified names, pointers,
slices/arrays (and variadic "...T"), maps. Everything else is OTHER and
resolves to INVALID_TYPE without raising; the caller decides how to report it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tree_sitter import Node

from structmeta.ast.models import TypeDescriptor
from structmeta.ast.parser import node_text
from structmeta.configs.constants import INVALID_TYPE


class TypeKind(str, Enum):
    """Closed set of type-expression shapes."""

    NAME = "name"
    QUALIFIED = "qualified"
    POINTER = "pointer"
    ARRAY = "array"
    MAP = "map"
    OTHER = "other"


@dataclass(frozen=True)
class TypeExpr:
    """
    A type expression, tagged by kind.

    Only the fields meaningful for the kind are set:
    NAME (name), QUALIFIED (package, name), POINTER (elem),
    ARRAY (elem, length, variadic), MAP (key, elem), OTHER (node_type, text).
    """

    kind: TypeKind
    name: str = ""
    package: str = ""
    elem: Optional["TypeExpr"] = None
    key: Optional["TypeExpr"] = None
    length: str = ""  # Fixed array length as written; empty for slices
    variadic: bool = False
    node_type: str = ""
    text: str = ""

    @classmethod
    def named(cls, name: str) -> "TypeExpr":
        return cls(TypeKind.NAME, name=name)

    @classmethod
    def qualified(cls, package: str, name: str) -> "TypeExpr":
        return cls(TypeKind.QUALIFIED, name=name, package=package)

    @classmethod
    def pointer(cls, elem: "TypeExpr") -> "TypeExpr":
        return cls(TypeKind.POINTER, elem=elem)

    @classmethod
    def array(cls, elem: "TypeExpr", length: str = "", variadic: bool = False) -> "TypeExpr":
        return cls(TypeKind.ARRAY, elem=elem, length=length, variadic=variadic)

    @classmethod
    def map(cls, key: "TypeExpr", value: "TypeExpr") -> "TypeExpr":
        return cls(TypeKind.MAP, key=key, elem=value)

    @classmethod
    def other(cls, node_type: str, text: str) -> "TypeExpr":
        return cls(TypeKind.OTHER, node_type=node_type, text=text)


def _collapse(text: str) -> str:
    return " ".join(text.split())


def _last_named_child(node: Node) -> Optional[Node]:
    named = [c for c in node.named_children if c.type != "comment"]
    return named[-1] if named else None


def type_expr_from_node(node: Optional[Node], source: bytes) -> TypeExpr:
    """
    Convert a tree-sitter Go type node into a TypeExpr.

    Args:
        node: Type node (type_identifier, pointer_type, slice_type, ...)
        source: Source bytes the tree was parsed from

    Returns:
        TypeExpr; unrecognized node types become TypeKind.OTHER
    """
    if node is None:
        return TypeExpr.other("missing", "")

    node_type = node.type

    if node_type == "type_identifier":
        return TypeExpr.named(node_text(node, source))

    if node_type == "qualified_type":
        package = node.child_by_field_name("package")
        name = node.child_by_field_name("name")
        if package is None or name is None:
            return TypeExpr.other(node_type, _collapse(node_text(node, source)))
        return TypeExpr.qualified(node_text(package, source), node_text(name, source))

    if node_type == "pointer_type":
        return TypeExpr.pointer(type_expr_from_node(_last_named_child(node), source))

    if node_type == "slice_type":
        return TypeExpr.array(type_expr_from_node(node.child_by_field_name("element"), source))

    if node_type == "array_type":
        length = node.child_by_field_name("length")
        return TypeExpr.array(
            type_expr_from_node(node.child_by_field_name("element"), source),
            length=_collapse(node_text(length, source)) if length is not None else "",
        )

    if node_type == "map_type":
        return TypeExpr.map(
            type_expr_from_node(node.child_by_field_name("key"), source),
            type_expr_from_node(node.child_by_field_name("value"), source),
        )

    if node_type == "parenthesized_type":
        return type_expr_from_node(_last_named_child(node), source)

    return TypeExpr.other(node_type, _collapse(node_text(node, source)))


def render(expr: TypeExpr) -> str:
    """
    Render a TypeExpr as Go source text.

    OTHER renders as its source text here; resolve() is what turns a
    top-level OTHER into INVALID_TYPE.
    """
    kind = expr.kind
    if kind == TypeKind.NAME:
        return expr.name
    if kind == TypeKind.QUALIFIED:
        return f"{expr.package}.{expr.name}"
    if kind == TypeKind.POINTER:
        return f"*{render(expr.elem)}"
    if kind == TypeKind.ARRAY:
        if expr.variadic:
            return f"...{render(expr.elem)}"
        return f"[{expr.length}]{render(expr.elem)}"
    if kind == TypeKind.MAP:
        return f"map[{render(expr.key)}]{render(expr.elem)}"
    return expr.text


def resolve(expr: TypeExpr) -> TypeDescriptor:
    """
    Classify a type expression.

    - NAME / QUALIFIED: not an array, not null
    - POINTER(T): T's array flag, nullable
    - ARRAY(T): array, T's nullability; base type is T's rendering
    - MAP: rendered whole, not an array, not null
    - OTHER: INVALID_TYPE for type and base type

    An invalid element makes the whole rendering invalid; the flags are
    still computed from the recognized wrappers.
    """
    kind = expr.kind

    if kind in (TypeKind.NAME, TypeKind.QUALIFIED, TypeKind.MAP):
        rendered = render(expr)
        return TypeDescriptor(type=rendered, base_type=rendered, is_array=False, not_null=True)

    if kind == TypeKind.POINTER:
        inner = resolve(expr.elem)
        if inner.type == INVALID_TYPE:
            return TypeDescriptor(INVALID_TYPE, INVALID_TYPE, inner.is_array, False)
        rendered = f"*{inner.type}"
        base = inner.base_type if inner.is_array else rendered
        return TypeDescriptor(type=rendered, base_type=base, is_array=inner.is_array, not_null=False)

    if kind == TypeKind.ARRAY:
        inner = resolve(expr.elem)
        if inner.type == INVALID_TYPE:
            return TypeDescriptor(INVALID_TYPE, INVALID_TYPE, True, inner.not_null)
        prefix = "..." if expr.variadic else f"[{expr.length}]"
        return TypeDescriptor(
            type=f"{prefix}{inner.type}",
            base_type=inner.type,
            is_array=True,
            not_null=inner.not_null,
        )

    return TypeDescriptor(type=INVALID_TYPE, base_type=INVALID_TYPE, is_array=False, not_null=True)


def find_unresolved(expr: TypeExpr) -> Optional[TypeExpr]:
    """Return the first OTHER reachable through pointer/array wrappers, if any."""
    if expr.kind == TypeKind.OTHER:
        return expr
    if expr.kind in (TypeKind.POINTER, TypeKind.ARRAY) and expr.elem is not None:
        return find_unresolved(expr.elem)
    return None
