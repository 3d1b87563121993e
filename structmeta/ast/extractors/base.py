"""
Base Extractor Interface

Abstract base class that all language extractors must implement, plus the
AST traversal and comment-attachment helpers they share.
"""

from abc import ABC, abstractmethod
from typing import Optional

from tree_sitter import Node, Tree

from structmeta.ast.models import TypeEntity
from structmeta.ast.parser import ASTParser, get_parser, node_text
from structmeta.configs.logging import get_logger

logger = get_logger("ast.extractors")

COMMENT_NODE = "comment"
NEWLINE_TOKEN = "\n"


class LanguageExtractor(ABC):
    """
    Abstract base class for language-specific declaration extractors.

    An extractor turns one parsed source unit into TypeEntity objects,
    one per record-like or contract-like declaration.
    """

    def __init__(self, parser: Optional[ASTParser] = None):
        self._parser = parser

    @property
    def parser(self) -> ASTParser:
        if self._parser is None:
            self._parser = get_parser()
        return self._parser

    @property
    @abstractmethod
    def language(self) -> str:
        """Return the language name (e.g., 'go')."""
        pass

    @abstractmethod
    def extract_declarations(self, tree: Tree, source: bytes, file_path: str) -> list[TypeEntity]:
        """
        Extract every qualifying type declaration from the AST.

        Args:
            tree: Parsed AST tree
            source: Original source bytes
            file_path: Path of the source unit (for diagnostics)

        Returns:
            TypeEntity objects in declaration order
        """
        pass

    def extract_source(self, source: bytes, file_path: str = "<source>") -> list[TypeEntity]:
        """Parse source bytes and extract their declarations."""
        tree = self.parser.parse(source, file_path)
        return self.extract_declarations(tree, source, file_path)

    def extract_file(self, file_path: str) -> list[TypeEntity]:
        """
        Parse a file and extract its declarations.

        Raises:
            SourceNotFoundError: If the file can't be read
            ParseError: If the file is not well-formed
            TagError: If a struct tag is malformed
        """
        tree, source = self.parser.parse_file(file_path)
        entities = self.extract_declarations(tree, source, file_path)
        logger.debug(f"Extracted {len(entities)} declarations from {file_path}")
        return entities

    # Helper methods for AST traversal

    def get_node_text(self, node: Node, source: bytes) -> str:
        """Extract the text content of an AST node."""
        return node_text(node, source)

    def find_child(self, node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type."""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    # Comment attachment

    def _prev_sibling(self, node: Node) -> Optional[Node]:
        """Previous sibling, skipping newline terminator tokens."""
        prev = node.prev_sibling
        while prev is not None and prev.type == NEWLINE_TOKEN:
            prev = prev.prev_sibling
        return prev

    def _next_sibling(self, node: Node) -> Optional[Node]:
        """Next sibling, skipping newline terminator tokens."""
        nxt = node.next_sibling
        while nxt is not None and nxt.type == NEWLINE_TOKEN:
            nxt = nxt.next_sibling
        return nxt

    def _trails_code(self, comment: Node) -> bool:
        """Whether a comment shares its starting line with earlier code."""
        row = comment.start_point[0]
        before = self._prev_sibling(comment)
        while before is not None and before.type == COMMENT_NODE and before.end_point[0] == row:
            row = before.start_point[0]
            before = self._prev_sibling(before)
        return before is not None and before.end_point[0] == row

    def doc_comments(self, node: Node, source: bytes) -> list[str]:
        """
        Comment lines directly above a node, verbatim.

        The comments must form one group ending on the line right before the
        node. A comment on the same line as earlier code, even behind other
        comments, trails that code and stops the group.
        """
        lines: list[str] = []
        expected_row = node.start_point[0] - 1
        prev = self._prev_sibling(node)
        while prev is not None and prev.type == COMMENT_NODE:
            if prev.end_point[0] != expected_row or self._trails_code(prev):
                break
            lines.insert(0, self.get_node_text(prev, source))
            expected_row = prev.start_point[0] - 1
            prev = self._prev_sibling(prev)
        return lines

    def trailing_comments(self, node: Node, source: bytes) -> list[str]:
        """Comments starting on the same line a node ends on, verbatim."""
        lines: list[str] = []
        row = node.end_point[0]
        nxt = self._next_sibling(node)
        while nxt is not None and nxt.type == COMMENT_NODE and nxt.start_point[0] == row:
            lines.append(self.get_node_text(nxt, source))
            row = nxt.end_point[0]
            nxt = self._next_sibling(nxt)
        return lines
