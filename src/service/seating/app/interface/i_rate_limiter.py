from abc import ABC, abstractmethod


class IRateLimiter(ABC):
    @abstractmethod
    def hit(self, *, key: str) -> None:
        """Record one call for `key`; raises RateLimitExceededError when over the limit"""
        pass
