"""
Go Declaration Extractor

Extracts struct (record) and interface (contract) declarations from Go
source files using tree-sitter, producing one TypeEntity per declaration.

Struct fields become members (embedded fields keyed by their type);
interface methods become members with flattened argument and result
lists; embedded interfaces become members keyed by their type.
"""

from typing import Optional

from tree_sitter import Node, Tree

from structmeta.ast.extractors.base import LanguageExtractor, logger
from structmeta.ast.models import (
    EntityKind,
    MemberEntity,
    ParameterDescriptor,
    TagInfo,
    TypeDescriptor,
    TypeEntity,
)
from structmeta.ast.naming import derive_names, lower_initial
from structmeta.ast.tags import parse_tag
from structmeta.ast.types import TypeExpr, find_unresolved, resolve, type_expr_from_node

# Node names differ between tree-sitter-go releases
_SPEC_NODES = ("type_spec", "type_alias")
_METHOD_NODES = ("method_elem", "method_spec")
_EMBED_NODES = ("type_elem", "interface_type_name", "constraint_elem")
_PARAM_NODES = ("parameter_declaration", "variadic_parameter_declaration")


class GoExtractor(LanguageExtractor):
    """Extracts struct and interface metadata from Go source files."""

    @property
    def language(self) -> str:
        return "go"

    def extract_declarations(self, tree: Tree, source: bytes, file_path: str) -> list[TypeEntity]:
        """Extract struct and interface declarations in source order."""
        entities = []

        for decl in tree.root_node.children:
            if decl.type != "type_declaration":
                continue

            grouped = self.find_child(decl, "(") is not None
            decl_docs = self.doc_comments(decl, source)

            for spec in decl.named_children:
                if spec.type not in _SPEC_NODES:
                    continue

                entity = self._extract_spec(spec, source, file_path)
                if entity is None:
                    continue

                if grouped:
                    entity.docs = self.doc_comments(spec, source) or list(decl_docs)
                    entity.comments = self.trailing_comments(spec, source)
                else:
                    entity.docs = list(decl_docs)
                    entity.comments = (
                        self.trailing_comments(spec, source)
                        or self.trailing_comments(decl, source)
                    )
                entities.append(entity)

        return entities

    def _extract_spec(self, spec: Node, source: bytes, file_path: str) -> Optional[TypeEntity]:
        """Build a TypeEntity from a type_spec, or None for other type shapes."""
        name_node = spec.child_by_field_name("name")
        type_node = spec.child_by_field_name("type")
        if name_node is None or type_node is None:
            return None

        if type_node.type == "struct_type":
            kind = EntityKind.STRUCT
        elif type_node.type == "interface_type":
            kind = EntityKind.INTERFACE
        else:
            return None

        declared = self.get_node_text(name_node, source)
        entity = TypeEntity(
            names=derive_names(declared, singularize=True),
            declared_name=declared,
            kind=kind,
            file_path=file_path,
        )

        if kind == EntityKind.STRUCT:
            entity.members = self._extract_struct_fields(type_node, source, file_path, declared)
        else:
            entity.members = self._extract_interface_members(type_node, source, file_path, declared)

        return entity

    # Structs

    def _extract_struct_fields(
        self, struct_node: Node, source: bytes, file_path: str, owner: str
    ) -> list[MemberEntity]:
        members = []
        field_list = self.find_child(struct_node, "field_declaration_list")
        if field_list is None:
            return members

        for field_node in field_list.named_children:
            if field_node.type != "field_declaration":
                continue
            members.extend(self._extract_field(field_node, source, file_path, owner))

        return members

    def _extract_field(
        self, field_node: Node, source: bytes, file_path: str, owner: str
    ) -> list[MemberEntity]:
        """One member per declared name; a single keyed-by-type member when embedded."""
        names = [self.get_node_text(n, source) for n in field_node.children_by_field_name("name")]

        expr = type_expr_from_node(field_node.child_by_field_name("type"), source)
        if not names and self.find_child(field_node, "*") is not None:
            expr = TypeExpr.pointer(expr)
        context = f"{owner}.{names[0]}" if names else f"{owner} (embedded)"
        type_info = self._resolve(expr, file_path, context)

        tag_node = field_node.child_by_field_name("tag")
        tag = parse_tag(self.get_node_text(tag_node, source)) if tag_node is not None else TagInfo()

        docs = self.doc_comments(field_node, source)
        comments = self.trailing_comments(field_node, source)

        if not names:
            return [
                MemberEntity(
                    names=derive_names(""),
                    type_info=type_info,
                    tag=tag,
                    docs=docs,
                    comments=comments,
                )
            ]

        return [
            MemberEntity(
                names=derive_names(name),
                type_info=type_info,
                tag=tag,
                docs=list(docs),
                comments=list(comments),
            )
            for name in names
        ]

    # Interfaces

    def _extract_interface_members(
        self, iface_node: Node, source: bytes, file_path: str, owner: str
    ) -> list[MemberEntity]:
        members = []

        for child in iface_node.named_children:
            if child.type in _METHOD_NODES:
                members.append(self._extract_method(child, source, file_path, owner))
            elif child.type in _EMBED_NODES:
                members.append(self._extract_embedded_interface(child, source, file_path, owner))

        return members

    def _extract_method(
        self, method_node: Node, source: bytes, file_path: str, owner: str
    ) -> MemberEntity:
        name_node = method_node.child_by_field_name("name")
        name = self.get_node_text(name_node, source) if name_node is not None else ""
        context = f"{owner}.{name}"

        params_node = method_node.child_by_field_name("parameters")
        result_node = method_node.child_by_field_name("result")

        args = self._extract_parameters(params_node, source, file_path, context)
        if result_node is None:
            results = []
        elif result_node.type == "parameter_list":
            results = self._extract_parameters(result_node, source, file_path, context)
        else:
            results = [
                ParameterDescriptor(
                    name="",
                    type_info=self._resolve(type_expr_from_node(result_node, source), file_path, context),
                )
            ]

        signature = self._signature(params_node, result_node, source)
        return MemberEntity(
            names=derive_names(name),
            type_info=TypeDescriptor(type=signature, base_type=signature),
            docs=self.doc_comments(method_node, source),
            comments=self.trailing_comments(method_node, source),
            args=args,
            results=results,
            is_method=True,
        )

    def _extract_embedded_interface(
        self, embed_node: Node, source: bytes, file_path: str, owner: str
    ) -> MemberEntity:
        type_nodes = [c for c in embed_node.named_children if c.type != "comment"]
        if len(type_nodes) == 1:
            expr = type_expr_from_node(type_nodes[0], source)
        else:
            # Type unions and constraint lists are not decomposed
            expr = TypeExpr.other(embed_node.type, " ".join(self.get_node_text(embed_node, source).split()))

        return MemberEntity(
            names=derive_names(""),
            type_info=self._resolve(expr, file_path, f"{owner} (embedded)"),
            docs=self.doc_comments(embed_node, source),
            comments=self.trailing_comments(embed_node, source),
        )

    def _extract_parameters(
        self, params_node: Optional[Node], source: bytes, file_path: str, context: str
    ) -> list[ParameterDescriptor]:
        """Flatten a parameter_list; `a, b int` yields one descriptor per name."""
        params: list[ParameterDescriptor] = []
        if params_node is None:
            return params

        for decl in params_node.named_children:
            if decl.type not in _PARAM_NODES:
                continue

            variadic = decl.type == "variadic_parameter_declaration"
            expr = type_expr_from_node(decl.child_by_field_name("type"), source)
            if variadic:
                expr = TypeExpr.array(expr, variadic=True)
            type_info = self._resolve(expr, file_path, context)

            names = [self.get_node_text(n, source) for n in decl.children_by_field_name("name")]
            for name in names or [""]:
                params.append(
                    ParameterDescriptor(
                        name=name,
                        type_info=type_info,
                        variadic=variadic,
                        lower_name=lower_initial(name),
                    )
                )

        return params

    def _signature(self, params_node: Optional[Node], result_node: Optional[Node], source: bytes) -> str:
        """Render a method as a func type, whitespace collapsed."""
        params = self.get_node_text(params_node, source) if params_node is not None else "()"
        signature = f"func{params}"
        if result_node is not None:
            signature = f"{signature} {self.get_node_text(result_node, source)}"
        return " ".join(signature.split())

    def _resolve(self, expr: TypeExpr, file_path: str, context: str) -> TypeDescriptor:
        """Resolve a type, logging shapes that degrade to the invalid marker."""
        unresolved = find_unresolved(expr)
        if unresolved is not None:
            logger.warning(
                f"Unresolved type {unresolved.text!r} ({unresolved.node_type}) "
                f"for {context} in {file_path}"
            )
        return resolve(expr)
