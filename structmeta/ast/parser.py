"""
Tree-sitter Parser Wrapper

Parses Go source units into tree-sitter syntax trees. Source that is not
UTF-8 and any syntax error are fatal: a tree containing ERROR or MISSING
nodes raises ParseError instead of being handed to the extractor.
"""

from pathlib import Path
from typing import Optional

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

from structmeta.configs.logging import get_logger
from structmeta.exceptions import ParseError, SourceNotFoundError

logger = get_logger("ast.parser")


def node_text(node: Node, source: bytes) -> str:
    """Extract the text content of an AST node."""
    return source[node.start_byte:node.end_byte].decode("utf-8")


def _first_error(node: Node) -> Optional[Node]:
    """Depth-first search for the first ERROR or MISSING node."""
    if node.type == "ERROR" or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = _first_error(child)
        if found is not None:
            return found
    return node


class ASTParser:
    """
    Tree-sitter based parser for Go source.

    Lazily initializes the parser on first use.
    """

    def __init__(self):
        self._language: Optional[Language] = None
        self._parser: Optional[Parser] = None

    def _get_parser(self) -> Parser:
        """Get or create the Go parser."""
        if self._parser is None:
            self._language = Language(tree_sitter_go.language())
            self._parser = Parser(self._language)
        return self._parser

    def parse(self, source: bytes, file_path: str = "<source>") -> Tree:
        """
        Parse Go source into a syntax tree.

        Args:
            source: Source code as UTF-8 bytes
            file_path: Name used in error details

        Returns:
            Tree-sitter Tree without syntax errors

        Raises:
            ParseError: If the source is not UTF-8 or not well-formed
        """
        try:
            source.decode("utf-8")
        except UnicodeDecodeError as e:
            line = source.count(b"\n", 0, e.start) + 1
            column = e.start - (source.rfind(b"\n", 0, e.start) + 1) + 1
            raise ParseError(
                f"invalid UTF-8 in {file_path}",
                file_path=file_path,
                line=line,
                column=column,
            ) from e

        tree = self._get_parser().parse(source)
        root = tree.root_node
        if root.has_error:
            error_node = _first_error(root) or root
            line, column = error_node.start_point
            kind = "missing token" if error_node.is_missing else "syntax error"
            raise ParseError(
                f"{kind} in {file_path}",
                file_path=file_path,
                line=line + 1,
                column=column + 1,
            )
        return tree

    def parse_file(self, file_path: str) -> tuple[Tree, bytes]:
        """
        Read and parse a Go file.

        Args:
            file_path: Path to the source file

        Returns:
            Tuple of (Tree, source bytes)

        Raises:
            SourceNotFoundError: If the file can't be read
            ParseError: If the source is not UTF-8 or not well-formed
        """
        try:
            source = Path(file_path).read_bytes()
        except OSError as e:
            raise SourceNotFoundError(
                f"Failed to read {file_path}: {e}", {"file": file_path}
            ) from e

        logger.debug(f"Parsing {file_path} ({len(source)} bytes)")
        return self.parse(source, file_path), source


# Global parser instance (lazy singleton)
_parser: Optional[ASTParser] = None


def get_parser() -> ASTParser:
    """Get the global ASTParser instance."""
    global _parser
    if _parser is None:
        _parser = ASTParser()
    return _parser
