from enum import Enum
from pathlib import Path
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel
from pydantic.config import ConfigDict

T = TypeVar("T")


class Field(Generic[T]):
    """Type-safe field definition for content artifact keys.

    Usage:
        class PostFields(SchemaBase):
            title = Field[str]("title")
            entry = Field[str]("entry")

    This allows for:
        getattr(post, PostFields.title.key)
        finding.field == PostFields.entry
    """

    def __init__(self, key: str):
        """
        Args:
            key: The key the value is stored under in the artifact document
        """
        self._key = key

    @property
    def key(self) -> str:
        """Return the underlying artifact key."""
        return self._key

    def __str__(self) -> str:
        """Return the key when used in messages"""
        return self._key

    def __repr__(self) -> str:
        return f"Field({self._key})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Field):
            return self._key == other._key
        if isinstance(other, str):
            return self._key == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key)


class SchemaBase:
    """Base class for artifact schema definitions with type-safe fields."""

    @classmethod
    def fields(cls) -> list[Field]:
        """Return the declared fields in declaration order."""
        return [value for value in vars(cls).values() if isinstance(value, Field)]


class PostFields(SchemaBase):
    """Keys of a post artifact document"""

    title = Field[str]("title")
    description = Field[str]("description")
    entry = Field[str]("entry")


class BaseEntity(BaseModel):
    """Base entity class for all content models."""

    model_config: ClassVar[ConfigDict] = ConfigDict(use_enum_values=True, extra="allow")
    source: Path | None = None


class Post(BaseEntity):
    """A post artifact: short title and summary plus the marked-up body.

    Missing keys default to the empty string so that required-field checks
    can report them instead of failing at construction time.
    """

    title: str = ""
    description: str = ""
    entry: str = ""

    @property
    def label(self) -> str:
        """Human readable identification used in reports"""
        if self.source is not None:
            return str(self.source)
        return self.title or "<untitled post>"


class AuthorAccessor(str, Enum):
    GRAVATAR = "gravatar"
    INDEX_URI = "index_uri"
    FEED_URI = "feed_uri"


class Author(BaseEntity):
    """Author metadata as exposed by the external rendering layer.

    The values are opaque here; only the accessor names matter.
    """

    gravatar: str | None = None
    index_uri: str | None = None
    feed_uri: str | None = None

    @classmethod
    def accessor_names(cls) -> frozenset[str]:
        return frozenset(accessor.value for accessor in AuthorAccessor)


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Finding(BaseModel):
    """A single integrity problem in one artifact"""

    model_config = ConfigDict(use_enum_values=True, frozen=True)

    code: str
    severity: Severity
    message: str
    source: str
    field: str | None = None
    line: int | None = None

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR

    def __str__(self) -> str:
        location = self.source
        if self.line is not None:
            location = f"{location}:{self.line}"
        if self.field:
            location = f"{location} [{self.field}]"
        return f"{location}: {self.code} {self.severity}: {self.message}"
