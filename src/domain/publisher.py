"""
Delivery capability for validated submissions.

The submission processor depends only on this interface, never on a concrete
message broker. Implementations live in the integrations package.
"""

from abc import ABC, abstractmethod

from .models import Submission


class DeliveryError(Exception):
    """Raised when a submission could not be handed to the delivery channel.

    The message may contain transport detail and must not be shown to clients.
    """
    pass


class Publisher(ABC):
    """
    Hands a validated Submission to an asynchronous channel.

    Implementations must either deliver the serialized record and return,
    or raise DeliveryError. They never re-validate the record.
    """

    @abstractmethod
    def publish(self, submission: Submission) -> str:
        """
        Publish a submission.

        Args:
            submission: Already-validated record

        Returns:
            str: Message identifier assigned by the transport

        Raises:
            DeliveryError: If the record was not accepted by the channel
        """
