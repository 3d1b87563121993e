"""
structmeta Exception Hierarchy

Centralized exception classes for structured error handling across the codebase.
All structmeta-specific exceptions inherit from StructMetaError.

Every exception here is fatal for a run: it propagates to the CLI, which
logs it and exits non-zero without writing a document. Unresolved type
shapes are not errors (see structmeta.ast.types).

Usage:
    from structmeta.exceptions import StructMetaError, ParseError

    try:
        entities = extract_file(path)
    except ParseError as e:
        logger.error(f"Parse failed: {e}")
"""


class StructMetaError(Exception):
    """Base exception for all structmeta errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(StructMetaError):
    """Error in structmeta configuration."""

    pass


class MissingConfigError(ConfigurationError):
    """Required configuration value is missing."""

    pass


# =============================================================================
# Extraction Errors
# =============================================================================


class ExtractError(StructMetaError):
    """Base class for extraction errors."""

    pass


class SourceNotFoundError(ExtractError):
    """Source file to extract from could not be read."""

    pass


class ParseError(ExtractError):
    """Source unit is not well-formed Go."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        details = {}
        if file_path:
            details["file"] = file_path
        if line is not None:
            details["line"] = line
        if column is not None:
            details["column"] = column
        super().__init__(message, details)
        self.file_path = file_path
        self.line = line
        self.column = column


class TagError(ExtractError):
    """Struct tag text has unparseable quoting."""

    def __init__(self, message: str, tag: str | None = None):
        details = {"tag": tag} if tag is not None else {}
        super().__init__(message, details)
        self.tag = tag


# =============================================================================
# Output Errors
# =============================================================================


class OutputError(StructMetaError):
    """Writing the output document failed."""

    pass
