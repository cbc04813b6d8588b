from dataclasses import dataclass
from typing import Optional


@dataclass
class PageResult:
    """Outcome of one frontier entry.

    Successful pages carry a 1-based `ordinal`; pages that failed while the
    traversal continued carry `error` and no ordinal.
    """

    source_url: str
    markdown: str = ""
    title: Optional[str] = None
    ordinal: Optional[int] = None
    depth: int = 1
    error: Optional[str] = None
