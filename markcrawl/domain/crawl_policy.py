from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional


@dataclass(frozen=True)
class CrawlPolicy:
    """Immutable crawl settings for one invocation.

    Ranges are enforced at the API boundary before a policy is built; the
    engine trusts these values and never re-validates them.
    """

    url: str
    max_depth: int = 1
    max_pages: int = 1
    include_subdomains: bool = False
    follow_external_links: bool = False
    wait_for_selector: Optional[str] = None
    exclude_patterns: tuple[str, ...] = ()
    include_patterns: tuple[str, ...] = ()
    custom_headers: Mapping[str, str] = field(default_factory=dict)
    timeout_seconds: int = 30
    extract_images: bool = False
    extract_tables: bool = True
    word_count_threshold: int = 1
    only_main_content: bool = True
    remove_images: bool = False
    remove_links: bool = False

    def __post_init__(self):
        # Sequences arrive as lists from the request layer; keep the value hashable.
        object.__setattr__(self, "exclude_patterns", tuple(self.exclude_patterns or ()))
        object.__setattr__(self, "include_patterns", tuple(self.include_patterns or ()))
        object.__setattr__(self, "custom_headers", dict(self.custom_headers or {}))
