"""Notifier Interface

Abstract contract for surfacing outcomes to the operator (blocking alerts in
the original form UI).
"""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Abstract base class for user notifications."""
    
    @abstractmethod
    def notify_success(self, message: str) -> None:
        """Surface a success message."""
        pass
    
    @abstractmethod
    def notify_error(self, message: str) -> None:
        """Surface an error message that requires acknowledgment."""
        pass
