"""Base serializer for JSON:API resource objects and collection documents."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from jsonapi_pages.core.document import JSONAPIDocumentBuilder
from jsonapi_pages.schemas.pagination import CollectionOptions


class JSONAPISerializer:
    """Serialize model instances or mappings into JSON:API resource objects."""

    document_builder_class: type = JSONAPIDocumentBuilder

    class Meta:
        """Serializer metadata (type, model, fields)."""

        type_: str = ""
        model: Any = None
        fields: list[str] = []

    def serialize(
        self,
        items: Iterable[Any],
        options: CollectionOptions | Mapping[str, Any],
    ) -> dict[str, Any]:
        """Return a collection document with ``data``, ``meta`` and ``links``."""
        options = CollectionOptions.coerce(options)
        return self.document_builder_class().build_collection(
            self.to_many(items),
            meta=options.meta.model_dump(),
            links=options.links.to_dict(),
        )

    def to_resource(self, instance: Any) -> dict[str, Any]:
        """Serialize a model instance into a JSON:API resource object."""
        return {
            "type": self.Meta.type_,
            "id": self.get_id(instance),
            "attributes": self.get_attributes(instance),
        }

    def to_many(self, instances: Iterable[Any]) -> list[dict[str, Any]]:
        """Serialize a collection of instances."""
        return [self.to_resource(instance) for instance in instances]

    def get_id(self, instance: Any) -> str:
        """Return the resource id as a string."""
        if isinstance(instance, Mapping):
            value = instance.get("id")
        else:
            value = getattr(instance, "id", None)
        return "" if value is None else str(value)

    def get_attributes(self, instance: Any) -> dict[str, Any]:
        """Return JSON:API attributes derived from serializer fields."""
        if self.Meta.fields:
            names = [field for field in self.Meta.fields if field != "id"]
            if isinstance(instance, Mapping):
                return {name: instance.get(name) for name in names}
            return {name: getattr(instance, name) for name in names}
        if isinstance(instance, Mapping):
            source = instance
        elif hasattr(instance, "__dict__"):
            source = vars(instance)
        else:
            return {}
        return {
            key: value
            for key, value in source.items()
            if not key.startswith("_") and key != "id"
        }
