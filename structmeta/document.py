"""
Document Assembler

Pools the entities extracted from every source unit of a run, orders them
by key, and wraps them in the output Document. Also owns JSON rendering
and writing of the finished document.
"""

import json
import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence

from structmeta.ast.extractors import GoExtractor, LanguageExtractor
from structmeta.ast.models import Document, TypeEntity
from structmeta.configs.constants import (
    DEFAULT_INDENT,
    DEFAULT_KIND,
    DEFAULT_OUTPUT_EXT,
    SRC_KIND,
    STDOUT_SENTINEL,
)
from structmeta.configs.logging import get_logger
from structmeta.exceptions import MissingConfigError, OutputError

logger = get_logger("document")


def assemble(entities: Iterable[TypeEntity], kind: str = DEFAULT_KIND) -> Document:
    """
    Order entities by key and wrap them in a Document.

    The sort is stable, so entities with equal keys keep extraction order.
    """
    ordered = sorted(entities, key=lambda entity: entity.key)
    return Document(kind=kind, src_kind=SRC_KIND, data=tuple(ordered))


def extract_files(
    paths: Sequence[str], extractor: Optional[LanguageExtractor] = None
) -> list[TypeEntity]:
    """
    Extract entities from each path in turn.

    The first unreadable or malformed file aborts the batch; its exception
    propagates unchanged.
    """
    extractor = extractor or GoExtractor()
    entities: list[TypeEntity] = []
    for path in paths:
        entities.extend(extractor.extract_file(path))
    logger.debug(f"Extracted {len(entities)} declarations from {len(paths)} file(s)")
    return entities


def build_document(
    paths: Sequence[str],
    kind: str = DEFAULT_KIND,
    extractor: Optional[LanguageExtractor] = None,
) -> Document:
    """Extract all paths and assemble the resulting Document."""
    return assemble(extract_files(paths, extractor), kind=kind)


def to_json(document: Document, indent: str = DEFAULT_INDENT) -> str:
    """Render a Document as indented JSON."""
    return json.dumps(document.to_dict(), indent=indent, ensure_ascii=False)


def default_output_path(inputs: Sequence[str], output_ext: str = DEFAULT_OUTPUT_EXT) -> str:
    """
    Output path used when none was given: the single input with its
    extension replaced.

    Raises:
        MissingConfigError: If there is not exactly one input
    """
    if len(inputs) != 1:
        raise MissingConfigError(
            "output path is required with multiple inputs", {"inputs": len(inputs)}
        )
    return str(Path(inputs[0]).with_suffix(output_ext))


def write_document(document: Document, output: str, indent: str = DEFAULT_INDENT) -> None:
    """
    Write the rendered document to a file, or to stdout for "-".

    Raises:
        OutputError: If the write fails
    """
    content = to_json(document, indent=indent)

    if output == STDOUT_SENTINEL:
        try:
            sys.stdout.write(content)
            sys.stdout.flush()
        except OSError as e:
            raise OutputError(f"Failed to write to stdout: {e}") from e
        return

    try:
        Path(output).write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Failed to write {output}: {e}", {"path": output}) from e
    logger.info(f"Wrote {len(document.data)} declarations to {output}")
