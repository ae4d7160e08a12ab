from typing import Self

from .base import BaseMessageBuilder


class InteractionResponseBuilder(BaseMessageBuilder):
    """Builds the initial response to an interaction."""

    def __init__(self, source=None) -> None:
        super().__init__(source)
        self.is_ephemeral = False
        if isinstance(source, InteractionResponseBuilder):
            self.is_ephemeral = source.is_ephemeral

    def as_ephemeral(self, ephemeral: bool = True) -> Self:
        self.is_ephemeral = ephemeral
        return self

    def clear(self) -> None:
        super().clear()
        self.is_ephemeral = False
