"""
Fixed-window rate limiting on the `limits` package.

With the default memory:// storage the counters live in process memory and
expire with their window; a redis:// URI shares them between instances.
"""

from limits import RateLimitItemPerSecond, storage, strategies

from src.app.services.rate_limiter import IRateLimiter


class FixedWindowRateLimiter(IRateLimiter):
    def __init__(
        self,
        max_requests: int,
        window_seconds: int,
        storage_uri: str = "memory://",
        namespace: str = "contact",
    ):
        self.storage = storage.storage_from_string(storage_uri)
        self.strategy = strategies.FixedWindowRateLimiter(self.storage)
        self.item = RateLimitItemPerSecond(max_requests, window_seconds, namespace=namespace)

    def hit(self, key: str) -> bool:
        return not self.strategy.hit(self.item, key)

    def reset(self) -> None:
        self.storage.reset()
