"""Minimal DOM node interface used by content selection and sanitizing.

BeautifulSoup `Tag`/`BeautifulSoup` objects satisfy it; another parser backend
only needs an adapter exposing the same members.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Protocol


class DomNode(Protocol):
    name: Optional[str]
    attrs: Mapping[str, Any]

    @property
    def children(self) -> Iterable[Any]: ...

    def find(self, name=None, attrs=None, **kwargs) -> Optional["DomNode"]: ...

    def find_all(self, name=None, attrs=None, **kwargs) -> list["DomNode"]: ...

    def decompose(self) -> None: ...


def class_tokens(node: DomNode) -> list[str]:
    """Return the node's class attribute as a list of tokens."""
    value = node.attrs.get("class") if node.attrs else None
    if not value:
        return []
    if isinstance(value, str):
        return value.split()
    return list(value)
