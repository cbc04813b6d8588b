from typing import NamedTuple, Optional


class HttpResponse(NamedTuple):
    """Response from a page fetch (plain HTTP or rendered)."""
    status_code: int
    text: str
    content_type: Optional[str] = None
    url: Optional[str] = None

    @property
    def ok(self) -> bool:
        return 200 <= int(self.status_code) < 300
