from .message_composer import MessageComposer
from .message_transport import DeliveryResult, MessageTransport

__all__ = [
    "DeliveryResult",
    "MessageComposer",
    "MessageTransport",
]
