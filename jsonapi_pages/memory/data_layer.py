"""In-memory collection provider."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

from jsonapi_pages.core.errors import ResourceNotFoundError


def _item_id(item: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get("id")
    return getattr(item, "id", None)


class InMemoryDataLayer:
    """Serve a fixed sequence of items as an ordered collection.

    Items are copied and sorted once at construction; later changes to the
    source iterable are not seen.
    """

    def __init__(
        self,
        items: Iterable[Any],
        *,
        resource_type: str = "items",
        key: Callable[[Any], Any] | None = None,
        reverse: bool = False,
    ) -> None:
        self.resource_type = resource_type
        items = list(items)
        if key is not None or reverse:
            items = sorted(items, key=key, reverse=reverse)
        self._items: tuple[Any, ...] = tuple(items)

    async def count(self) -> int:
        return len(self._items)

    async def slice(self, offset: int, limit: int) -> list[Any]:
        if offset < 0 or limit < 1:
            raise ValueError(f"Invalid slice offset={offset} limit={limit}.")
        return list(self._items[offset : offset + limit])

    async def retrieve(self, *, resource_id: str) -> Any:
        for item in self._items:
            if str(_item_id(item)) == str(resource_id):
                return item
        raise ResourceNotFoundError(self.resource_type, resource_id)
