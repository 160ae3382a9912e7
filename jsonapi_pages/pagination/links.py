"""Navigation link generation for page-number pagination."""

from __future__ import annotations

from typing import Any, Iterator, Mapping
from urllib.parse import SplitResult, quote, unquote_plus, urlsplit, urlunsplit

import structlog

from jsonapi_pages.core.errors import MalformedURLError

from .calculator import PageMetadata

PAGE_NUMBER_PARAM = "page[number]"
PAGE_SIZE_PARAM = "page[size]"
LINK_NAMES = ("self", "first", "prev", "next", "last")

logger = structlog.get_logger(__name__)


class LinkSet(Mapping[str, str]):
    """Read-only mapping of link name to URL, ordered self/first/prev/next/last.

    Links that do not apply are absent rather than mapped to ``None``.
    """

    __slots__ = ("_links",)

    def __init__(self, links: Mapping[str, str | None] | None = None) -> None:
        links = dict(links or {})
        unknown = set(links) - set(LINK_NAMES)
        if unknown:
            raise ValueError(f"Unknown link names: {sorted(unknown)}")
        self._links: dict[str, str] = {
            name: links[name] for name in LINK_NAMES if links.get(name) is not None
        }

    def __getitem__(self, name: str) -> str:
        return self._links[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._links)

    def __len__(self) -> int:
        return len(self._links)

    def __repr__(self) -> str:
        return f"LinkSet({self._links!r})"

    def to_dict(self) -> dict[str, str]:
        return dict(self._links)


def _split_url(base_url: Any) -> SplitResult:
    if not isinstance(base_url, str):
        raise MalformedURLError(base_url, "expected a string")
    try:
        split = urlsplit(base_url)
        # Accessing the port validates it.
        split.port
    except ValueError as exc:
        raise MalformedURLError(base_url, str(exc)) from exc
    if not split.scheme or not split.netloc:
        raise MalformedURLError(base_url, "expected an absolute URL")
    return split


def _query_segments(query: str) -> list[tuple[str, str]]:
    """Return (decoded key, raw segment) pairs for a raw query string."""
    segments = []
    for segment in query.split("&"):
        if not segment:
            continue
        key = unquote_plus(segment.split("=", 1)[0])
        segments.append((key, segment))
    return segments


def _encode_param(key: str, value: int) -> str:
    return f"{quote(key, safe='[]')}={value}"


class LinkBuilder:
    """Build JSON:API navigation links from page metadata and a request URL."""

    def build(self, metadata: PageMetadata, base_url: str) -> LinkSet:
        """Return the links for ``metadata`` rooted at ``base_url``.

        Only the ``page[number]`` and ``page[size]`` query entries are
        rewritten; every other entry is kept as-is and in order.
        """
        try:
            split = _split_url(base_url)
        except MalformedURLError as exc:
            logger.warning("malformed_base_url", url=repr(base_url), reason=exc.reason)
            raise
        segments = _query_segments(split.query)
        page_size = metadata.page_size

        def with_page(number: int, size: int) -> str:
            values = {PAGE_NUMBER_PARAM: number, PAGE_SIZE_PARAM: size}
            emitted: set[str] = set()
            parts: list[str] = []
            for key, segment in segments:
                if key in values:
                    if key not in emitted:
                        parts.append(_encode_param(key, values[key]))
                        emitted.add(key)
                    continue
                parts.append(segment)
            for key, value in values.items():
                if key not in emitted:
                    parts.append(_encode_param(key, value))
            query = "&".join(parts)
            return urlunsplit((split.scheme, split.netloc, split.path, query, split.fragment))

        links: dict[str, str] = {"self": with_page(metadata.page_number, page_size)}
        if metadata.page_count >= 1:
            links["first"] = with_page(1, page_size)
        if metadata.page_number > 1:
            links["prev"] = with_page(metadata.page_number - 1, page_size)
        if metadata.page_number < metadata.page_count:
            links["next"] = with_page(metadata.page_number + 1, page_size)
        if metadata.page_count >= 1:
            links["last"] = with_page(max(metadata.page_count, 1), page_size)

        link_set = LinkSet(links)
        logger.debug("links_built", links=list(link_set))
        return link_set
