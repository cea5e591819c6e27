from abc import ABC, abstractmethod
from contextlib import AbstractContextManager


class TransactionManager(ABC):
    @abstractmethod
    def transaction(self) -> AbstractContextManager:
        """Commit on normal exit, roll back on any exception."""
        pass
