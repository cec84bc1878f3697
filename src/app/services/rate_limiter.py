from abc import ABC, abstractmethod


class IRateLimiter(ABC):
    @abstractmethod
    def hit(self, key: str) -> bool:
        """Record a request for key; True when the limit is exceeded"""
        pass
