"""
Data Models for Declaration Extraction

Structured representations of the struct and interface metadata extracted
from Go source files, plus the document envelope they are written in.

Each model has a to_dict() producing the JSON shape consumed by the
code-generation templates. Optional collections and flags are omitted
when empty.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class EntityKind(str, Enum):
    """Shape of an extracted type declaration."""

    STRUCT = "struct"  # record type
    INTERFACE = "interface"  # contract type


@dataclass(frozen=True)
class TypeDescriptor:
    """Classification of a type expression."""

    type: str  # Full rendering, e.g. "[]*models.User"
    base_type: str  # Element type with the array wrapper stripped
    is_array: bool = False
    not_null: bool = True


@dataclass(frozen=True)
class NameForms:
    """Every spelling derived from one declared identifier."""

    singular: str = ""
    plural: str = ""
    camel: str = ""  # Go identifier of the singular, e.g. "UserID"
    camel_plural: str = ""
    lower_camel: str = ""  # JSON-style, e.g. "userId"
    lower_camel_plural: str = ""
    lower_initial: str = ""  # First rune lowered, e.g. "userID"
    snake: str = ""
    short: str = ""  # e.g. "ua" for "UserAccount"


@dataclass
class ParameterDescriptor:
    """One parameter or result of an interface method."""

    name: str  # Empty for unnamed parameters
    type_info: TypeDescriptor
    variadic: bool = False
    lower_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "Name": self.name,
            "name": self.lower_name,
            "Type": self.type_info.type,
            "baseType": self.type_info.base_type,
            "isArray": self.type_info.is_array,
            "notNull": self.type_info.not_null,
        }
        if self.variadic:
            data["variadic"] = True
        return data


@dataclass
class TagInfo:
    """A parsed struct tag: the full key/value map plus promoted directives."""

    raw: str = ""
    values: dict[str, str] = field(default_factory=dict)
    faker: str = ""
    fixture: str = ""
    json: str = ""
    db: str = ""
    graphql: str = ""


@dataclass
class MemberEntity:
    """A struct field or an interface method/embedded interface."""

    names: NameForms
    type_info: TypeDescriptor
    tag: TagInfo = field(default_factory=TagInfo)
    docs: list[str] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
    args: list[ParameterDescriptor] = field(default_factory=list)
    results: list[ParameterDescriptor] = field(default_factory=list)
    is_method: bool = False

    @property
    def name(self) -> str:
        """Declared name; empty for embedded members."""
        return self.names.singular

    @property
    def embedded(self) -> bool:
        return not self.names.singular

    @property
    def key(self) -> str:
        if self.names.singular:
            return self.names.lower_camel
        return self.type_info.type

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "Name": self.names.singular,
            "name": self.names.lower_initial,
            "nameJson": self.names.lower_camel,
            "nameSnake": self.names.snake,
            "Type": self.type_info.type,
            "baseType": self.type_info.base_type,
            "isArray": self.type_info.is_array,
            "notNull": self.type_info.not_null,
        }
        if self.embedded:
            data["embedded"] = True
        if self.is_method:
            data["method"] = True
        optional = {
            "tag": self.tag.raw,
            "tags": dict(self.tag.values),
            "tagFaker": self.tag.faker,
            "tagFixture": self.tag.fixture,
            "tagJson": self.tag.json,
            "tagDb": self.tag.db,
            "tagGraphql": self.tag.graphql,
            "docs": list(self.docs),
            "comments": list(self.comments),
            "args": [a.to_dict() for a in self.args],
            "results": [r.to_dict() for r in self.results],
        }
        data.update({k: v for k, v in optional.items() if v})
        data["key"] = self.key
        return data


@dataclass
class TypeEntity:
    """An extracted struct or interface declaration."""

    names: NameForms
    declared_name: str
    kind: EntityKind
    members: list[MemberEntity] = field(default_factory=list)
    docs: list[str] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
    file_path: Optional[str] = None  # Not serialized

    @property
    def key(self) -> str:
        return self.names.camel

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "Name": self.names.camel,
            "name": self.declared_name,
            "nameJson": self.names.lower_camel,
            "nameSnake": self.names.snake,
            "n": self.names.short,
            "Names": self.names.camel_plural,
            "names": self.names.lower_camel_plural,
            "kind": self.kind.value,
        }
        if self.docs:
            data["docs"] = list(self.docs)
        if self.comments:
            data["comments"] = list(self.comments)
        data["fields"] = [m.to_dict() for m in self.members]
        data["key"] = self.key
        return data


@dataclass(frozen=True)
class Document:
    """The output envelope handed to serialization."""

    kind: str
    src_kind: str
    data: tuple[TypeEntity, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "srcKind": self.src_kind,
            "data": [entity.to_dict() for entity in self.data],
        }
