from .message_dispatch_service import MessageDispatchService

__all__ = ["MessageDispatchService"]
