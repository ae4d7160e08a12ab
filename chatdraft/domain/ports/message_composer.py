"""
Capability interface shared by every message builder.

Transports and other generic code build and read messages through this
interface without knowing which builder variant produced them.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import BinaryIO

from ..value_objects import AttachedFile, Component, ComponentRow, Embed, MentionRule


class MessageComposer(ABC):
    """Variant-agnostic view of a message under construction."""

    @property
    @abstractmethod
    def content(self) -> str | None:
        ...

    @content.setter
    @abstractmethod
    def content(self, value: str | None) -> None:
        ...

    @property
    @abstractmethod
    def is_tts(self) -> bool:
        ...

    @is_tts.setter
    @abstractmethod
    def is_tts(self, value: bool) -> None:
        ...

    @property
    @abstractmethod
    def embeds(self) -> tuple[Embed, ...]:
        ...

    @property
    @abstractmethod
    def files(self) -> tuple[AttachedFile, ...]:
        ...

    @property
    @abstractmethod
    def components(self) -> tuple[ComponentRow, ...]:
        ...

    @property
    @abstractmethod
    def mentions(self) -> tuple[MentionRule, ...]:
        ...

    @abstractmethod
    def with_content(self, content: str | None) -> "MessageComposer":
        ...

    @abstractmethod
    def with_tts(self, is_tts: bool) -> "MessageComposer":
        ...

    @abstractmethod
    def add_components(self, *components: Component | Iterable[Component]) -> "MessageComposer":
        """Add one row holding the given components, passed separately or as one iterable."""
        ...

    @abstractmethod
    def add_component_rows(self, rows: Iterable[ComponentRow]) -> "MessageComposer":
        ...

    @abstractmethod
    def add_embed(self, embed: Embed | None) -> "MessageComposer":
        ...

    @abstractmethod
    def add_embeds(self, embeds: Iterable[Embed]) -> "MessageComposer":
        ...

    @abstractmethod
    def add_file(
        self, name: str, stream: BinaryIO, reset_position: bool = False
    ) -> "MessageComposer":
        ...

    @abstractmethod
    def add_file_handle(self, stream: BinaryIO, reset_position: bool = False) -> "MessageComposer":
        ...

    @abstractmethod
    def add_files(
        self,
        files: Mapping[str, BinaryIO] | Iterable[AttachedFile],
        reset_position: bool = False,
    ) -> "MessageComposer":
        ...

    @abstractmethod
    def reattach_files(self, files: Iterable[AttachedFile]) -> "MessageComposer":
        ...

    @abstractmethod
    def add_mention(self, mention: MentionRule) -> "MessageComposer":
        ...

    @abstractmethod
    def add_mentions(self, mentions: Iterable[MentionRule]) -> "MessageComposer":
        ...

    @abstractmethod
    def clear_components(self) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...
