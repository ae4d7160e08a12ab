"""
Outbound port for sending a finished message.

Serialization, multipart uploads, HTTP errors and rate limiting are the
concern of the adapters that implement this interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .message_composer import MessageComposer


@dataclass
class DeliveryResult:
    """Result of a send attempt."""

    success: bool
    target_id: str | None = None
    external_id: str | None = None
    error: str | None = None


class MessageTransport(ABC):
    """Outbound port for delivering messages to a channel, webhook or interaction."""

    @abstractmethod
    async def send(self, target_id: str, message: MessageComposer) -> DeliveryResult:
        """
        Send a message.

        Args:
            target_id: Channel, webhook or interaction the message goes to
            message: Read access to the accumulated message state

        Returns:
            DeliveryResult with success status and the platform's message ID
        """
        ...
