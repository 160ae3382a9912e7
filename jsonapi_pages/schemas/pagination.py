"""Pydantic schemas for the meta/links options handed to serializers."""

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class PaginationMeta(BaseModel):
    """Top-level ``meta`` of a paginated collection document."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(ge=0)
    pages: int = Field(ge=0)


class PaginationLinks(BaseModel):
    """Top-level ``links`` of a paginated collection document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    self_: str = Field(alias="self")
    first: Optional[str] = None
    prev: Optional[str] = None
    next: Optional[str] = None
    last: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        """Return the links present, keyed by their JSON:API names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CollectionOptions(BaseModel):
    """Options bag consumed by ``JSONAPISerializer.serialize``."""

    model_config = ConfigDict(frozen=True)

    meta: PaginationMeta
    links: PaginationLinks

    @classmethod
    def coerce(cls, options: "CollectionOptions | Mapping[str, Any]") -> "CollectionOptions":
        """Return options as a validated model."""
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))
