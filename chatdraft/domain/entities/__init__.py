from .draft import MAX_COMPONENT_ROWS, MAX_CONTENT_LENGTH, MAX_FILES, MessageDraft

__all__ = ["MAX_COMPONENT_ROWS", "MAX_CONTENT_LENGTH", "MAX_FILES", "MessageDraft"]
