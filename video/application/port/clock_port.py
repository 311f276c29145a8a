from abc import ABC, abstractmethod
from datetime import datetime


class ClockPort(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """timezone-aware(UTC) 현재 시각."""
        raise NotImplementedError
