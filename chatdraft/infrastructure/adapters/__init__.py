from .in_memory_transport import InMemoryTransport, SentMessage

__all__ = ["InMemoryTransport", "SentMessage"]
