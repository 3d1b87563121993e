"""
Go Declaration Analysis

Tree-sitter based extraction of struct and interface metadata from Go
source files, normalized for code-generation templates.
"""

from structmeta.ast.models import (
    Document,
    EntityKind,
    MemberEntity,
    NameForms,
    ParameterDescriptor,
    TagInfo,
    TypeDescriptor,
    TypeEntity,
)
from structmeta.ast.parser import ASTParser, get_parser
from structmeta.ast.naming import derive_names
from structmeta.ast.tags import parse_tag
from structmeta.ast.types import TypeExpr, TypeKind, resolve, type_expr_from_node

__all__ = [
    # Models
    "Document",
    "EntityKind",
    "MemberEntity",
    "NameForms",
    "ParameterDescriptor",
    "TagInfo",
    "TypeDescriptor",
    "TypeEntity",
    # Parser
    "ASTParser",
    "get_parser",
    # Normalization
    "derive_names",
    "parse_tag",
    "TypeExpr",
    "TypeKind",
    "resolve",
    "type_expr_from_node",
]
