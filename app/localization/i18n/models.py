"""Catalog models for the translation runtime.

A catalog is parsed once from raw nested data into an immutable tree of
tagged values, so key traversal fails structurally instead of tripping over
unexpected types at lookup time:

- ``Leaf``: a message template string
- ``Plural``: plural category -> template string
- ``Node``: key segment -> further values
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from localization.i18n.errors import CatalogFormatError

PLURAL_CATEGORIES = ("zero", "one", "two", "few", "many", "other")

KEY_SEPARATOR = "."


def split_key(key: str) -> List[str]:
    """Split a dotted key path into segments.

    Args:
        key: Dotted key (e.g., "cart.items").

    Returns:
        List of segments.

    Raises:
        ValueError: If the key is empty or has empty segments.
    """
    segments = key.split(KEY_SEPARATOR)
    if not key or any(not segment for segment in segments):
        raise ValueError(f"Invalid translation key: '{key}'")
    return segments


@dataclass(frozen=True)
class Leaf:
    """A single message template."""

    text: str


@dataclass(frozen=True)
class Plural:
    """Message variants keyed by plural category."""

    variants: Mapping[str, str]

    def variant(self, category: str) -> Optional[str]:
        return self.variants.get(category)


@dataclass(frozen=True)
class Node:
    """Intermediate mapping from key segment to child values."""

    children: Mapping[str, "MessageValue"]

    def child(self, segment: str) -> Optional["MessageValue"]:
        return self.children.get(segment)


MessageValue = Union[Leaf, Plural, Node]

# Resolved values are always messages, never intermediate nodes
Message = Union[Leaf, Plural]


@dataclass(frozen=True)
class Catalog:
    """Immutable set of messages for one locale.

    Attributes:
        locale: Locale identifier this catalog serves.
        root: Root node of the message tree.
        loaded_at: Timestamp (ISO 8601) when the catalog was parsed.
    """

    locale: str
    root: Node
    loaded_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    @classmethod
    def from_mapping(cls, locale: str, data: Mapping[str, Any]) -> "Catalog":
        """Parse raw nested catalog data.

        Args:
            locale: Locale the data belongs to.
            data: Nested mapping of string keys to strings or mappings.

        Returns:
            Parsed Catalog.

        Raises:
            CatalogFormatError: If the data does not have the catalog shape.
        """
        if not isinstance(data, Mapping):
            raise CatalogFormatError(
                locale, "", f"expected a mapping, got {type(data).__name__}"
            )
        return cls(locale=locale, root=_parse_node(locale, "", data))

    def lookup(self, key: str) -> Optional[Message]:
        """Walk a dotted key through the tree.

        Args:
            key: Dotted key path.

        Returns:
            Leaf or Plural at the path, or None when a segment is absent or
            the path ends on an intermediate node.
        """
        current: MessageValue = self.root
        for segment in split_key(key):
            if not isinstance(current, Node):
                return None
            child = current.child(segment)
            if child is None:
                return None
            current = child
        if isinstance(current, Node):
            return None
        return current

    def has_message(self, key: str) -> bool:
        return self.lookup(key) is not None

    def keys(self) -> Iterator[str]:
        """Iterate the dotted keys of every message in the catalog."""
        stack: List[Tuple[str, Node]] = [("", self.root)]
        while stack:
            prefix, node = stack.pop()
            for segment, value in sorted(node.children.items(), reverse=True):
                path = f"{prefix}{KEY_SEPARATOR}{segment}" if prefix else segment
                if isinstance(value, Node):
                    stack.append((path, value))
                else:
                    yield path


def _is_plural_mapping(raw: Mapping[Any, Any]) -> bool:
    return bool(raw) and all(
        key in PLURAL_CATEGORIES and isinstance(value, str)
        for key, value in raw.items()
    )


def _parse_value(locale: str, path: str, raw: Any) -> MessageValue:
    if isinstance(raw, str):
        return Leaf(raw)
    if isinstance(raw, Mapping):
        if _is_plural_mapping(raw):
            return Plural(MappingProxyType(dict(raw)))
        return _parse_node(locale, path, raw)
    raise CatalogFormatError(
        locale, path, f"expected string or mapping, got {type(raw).__name__}"
    )


def _parse_node(locale: str, path: str, raw: Mapping[Any, Any]) -> Node:
    children: Dict[str, MessageValue] = {}
    siblings: Dict[str, Dict[str, str]] = {}

    for segment, value in raw.items():
        if not isinstance(segment, str) or not segment:
            raise CatalogFormatError(
                locale,
                path,
                f"invalid key {segment!r}: keys must be non-empty strings"
                " (quote keys such as yes/no/on/off in YAML)",
            )
        if KEY_SEPARATOR in segment:
            raise CatalogFormatError(
                locale, path, f"key '{segment}' must not contain '{KEY_SEPARATOR}'"
            )
        child_path = f"{path}{KEY_SEPARATOR}{segment}" if path else segment
        children[segment] = _parse_value(locale, child_path, value)

        # i18next-style sibling plurals: items_one, items_other
        base, _, suffix = segment.rpartition("_")
        if base and suffix in PLURAL_CATEGORIES and isinstance(value, str):
            siblings.setdefault(base, {})[suffix] = value

    for base, variants in siblings.items():
        if "other" in variants and base not in children:
            children[base] = Plural(MappingProxyType(variants))

    return Node(MappingProxyType(children))


class LoadStatus(str, Enum):
    """Per-locale catalog loading status."""

    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class LoadState:
    """Loaded-State of one locale.

    Attributes:
        status: Current LoadStatus.
        catalog: The catalog when LOADED.
        pending: Shared in-flight load task when LOADING.
        error: Last failure when FAILED.
    """

    status: LoadStatus = LoadStatus.NOT_LOADED
    catalog: Optional[Catalog] = None
    pending: Optional["asyncio.Task[Catalog]"] = None
    error: Optional[BaseException] = None
