from typing import Self

from .base import BaseMessageBuilder


class FollowupMessageBuilder(BaseMessageBuilder):
    """Builds a followup message sent after an interaction was answered."""

    def __init__(self, source=None) -> None:
        super().__init__(source)
        self.is_ephemeral = False
        if isinstance(source, FollowupMessageBuilder):
            self.is_ephemeral = source.is_ephemeral

    def as_ephemeral(self, ephemeral: bool = True) -> Self:
        """Only show the followup to the user who triggered the interaction."""
        self.is_ephemeral = ephemeral
        return self

    def clear(self) -> None:
        super().clear()
        self.is_ephemeral = False
