from pathlib import Path
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from postlint.errors import ContentReadError

T = TypeVar("T", bound=BaseModel)


class EntityMapper(Generic[T]):
    """Composition class for entity mapping operations"""

    def __init__(self, entity_class: type[T]):
        self.entity_class = entity_class

    def map_document_to_entity(self, document: dict[str, Any], source: Path | None = None) -> T:
        """Map a parsed artifact document to an entity"""
        data = dict(document)
        if source is not None:
            data["source"] = source
        try:
            return self.entity_class.model_validate(data)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            raise ContentReadError(source or "<document>", f"malformed artifact ({problems})") from exc
