"""Discovered API resources and lookups over them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Optional, Sequence, Tuple

LIST = "list"
GET = "get"
WATCH = "watch"
CREATE = "create"
UPDATE = "update"
PATCH = "patch"
DELETE = "delete"
DELETE_COLLECTION = "deletecollection"


class Scope(Enum):
    """Whether a resource lives in a namespace or in the whole cluster."""

    CLUSTER = auto()
    NAMESPACED = auto()


@dataclass(frozen=True)
class ApiResource:
    """Identity of a discovered API resource."""

    group: str
    version: str
    kind: str
    plural: str

    @property
    def api_version(self) -> str:
        return f"{self.group}/{self.version}" if self.group else self.version


@dataclass(frozen=True)
class ApiCapabilities:
    """Scope and supported verbs of a discovered API resource."""

    scope: Scope
    operations: frozenset[str] = field(default_factory=frozenset)

    def supports_operation(self, verb: str) -> bool:
        """Return ``True`` if ``verb`` is supported."""
        return verb in self.operations


@dataclass(frozen=True)
class KindRef:
    """A kind that can be listed, identified by group, plural name and version."""

    group: str
    name: str
    version: str


Entry = Tuple[ApiResource, ApiCapabilities]

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def _eq_ignore_case(a: str, b: str) -> bool:
    return a.translate(_ASCII_LOWER) == b.translate(_ASCII_LOWER)


def _matches_name(resource: ApiResource, name: str) -> bool:
    return _eq_ignore_case(name, resource.kind) or _eq_ignore_case(name, resource.plural)


def _find_no_group(entries: Sequence[Entry], name: str) -> Optional[Entry]:
    candidates = [entry for entry in entries if _matches_name(entry[0], name)]
    if not candidates:
        return None
    return min(candidates, key=lambda entry: entry[0].group)


def _find_with_group(entries: Sequence[Entry], name: str, group: str) -> Optional[Entry]:
    if not group:
        return _find_no_group(entries, name)
    return next(
        (e for e in entries if _eq_ignore_case(group, e[0].group) and _matches_name(e[0], name)),
        None,
    )


def find_resource(entries: Optional[Sequence[Entry]], name: str) -> Optional[Entry]:
    """Return the first entry matching ``name`` (kind or plural, case-insensitive).

    ``name`` may be ``name.group``. Without a group, the match with the smallest
    group wins.
    """
    if entries is None:
        return None
    if "." in name:
        base, group = name.split(".", 1)
        return _find_with_group(entries, base, group)
    return _find_no_group(entries, name)


def list_kinds(entries: Optional[Iterable[Entry]]) -> Optional[list[KindRef]]:
    """Return the kinds that support listing, in discovery order."""
    if entries is None:
        return None
    return [
        KindRef(resource.group, resource.plural, resource.version)
        for resource, capabilities in entries
        if capabilities.supports_operation(LIST)
    ]