import threading
import time
from typing import Callable, Optional

from markcrawl.domain.crawl_policy import CrawlPolicy


class CrawlSession:
    """
    Execution state shared by the strategies of a single crawl invocation.

    Holds the policy, the caller's cancellation event and the wall-clock
    deadline. The deadline bounds the whole invocation and is independent of
    the per-fetch timeout carried by the policy.
    """

    def __init__(
        self,
        policy: CrawlPolicy,
        stop_event: Optional[threading.Event] = None,
        timeout_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.policy = policy
        self.stop_event = stop_event if stop_event is not None else threading.Event()
        self._clock = clock
        self.deadline: Optional[float] = None
        if timeout_seconds is not None and timeout_seconds > 0:
            self.deadline = clock() + float(timeout_seconds)

    def is_stopped(self) -> bool:
        """Check if the caller asked the crawl to stop."""
        return self.stop_event.is_set()

    def timed_out(self) -> bool:
        return self.deadline is not None and self._clock() >= self.deadline

    def stop_reason(self) -> Optional[str]:
        if self.is_stopped():
            return "cancelled"
        if self.timed_out():
            return "timed out"
        return None
