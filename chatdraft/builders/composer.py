"""Non-owning MessageComposer adapter over a builder."""

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, BinaryIO

from ..domain.ports import MessageComposer
from ..domain.value_objects import AttachedFile, Component, ComponentRow, Embed, MentionRule

if TYPE_CHECKING:
    from .base import BaseMessageBuilder


class DraftComposer(MessageComposer):
    """
    Exposes a builder through the MessageComposer interface.

    The adapter holds no state of its own: mutations made through it land
    in the builder's draft, and clear() resets variant fields too.
    """

    def __init__(self, builder: "BaseMessageBuilder") -> None:
        self._builder = builder

    @property
    def builder(self) -> "BaseMessageBuilder":
        return self._builder

    @property
    def content(self) -> str | None:
        return self._builder.content

    @content.setter
    def content(self, value: str | None) -> None:
        self._builder.content = value

    @property
    def is_tts(self) -> bool:
        return self._builder.is_tts

    @is_tts.setter
    def is_tts(self, value: bool) -> None:
        self._builder.is_tts = value

    @property
    def embeds(self) -> tuple[Embed, ...]:
        return self._builder.embeds

    @property
    def files(self) -> tuple[AttachedFile, ...]:
        return self._builder.files

    @property
    def components(self) -> tuple[ComponentRow, ...]:
        return self._builder.components

    @property
    def mentions(self) -> tuple[MentionRule, ...]:
        return self._builder.mentions

    def with_content(self, content: str | None) -> MessageComposer:
        self._builder.with_content(content)
        return self

    def with_tts(self, is_tts: bool) -> MessageComposer:
        self._builder.with_tts(is_tts)
        return self

    def add_components(self, *components: Component | Iterable[Component]) -> MessageComposer:
        self._builder.add_components(*components)
        return self

    def add_component_rows(self, rows: Iterable[ComponentRow]) -> MessageComposer:
        self._builder.add_component_rows(rows)
        return self

    def add_embed(self, embed: Embed | None) -> MessageComposer:
        self._builder.add_embed(embed)
        return self

    def add_embeds(self, embeds: Iterable[Embed]) -> MessageComposer:
        self._builder.add_embeds(embeds)
        return self

    def add_file(
        self, name: str, stream: BinaryIO, reset_position: bool = False
    ) -> MessageComposer:
        self._builder.add_file(name, stream, reset_position)
        return self

    def add_file_handle(self, stream: BinaryIO, reset_position: bool = False) -> MessageComposer:
        self._builder.add_file_handle(stream, reset_position)
        return self

    def add_files(
        self,
        files: Mapping[str, BinaryIO] | Iterable[AttachedFile],
        reset_position: bool = False,
    ) -> MessageComposer:
        self._builder.add_files(files, reset_position)
        return self

    def reattach_files(self, files: Iterable[AttachedFile]) -> MessageComposer:
        self._builder.reattach_files(files)
        return self

    def add_mention(self, mention: MentionRule) -> MessageComposer:
        self._builder.add_mention(mention)
        return self

    def add_mentions(self, mentions: Iterable[MentionRule]) -> MessageComposer:
        self._builder.add_mentions(mentions)
        return self

    def clear_components(self) -> None:
        self._builder.clear_components()

    def clear(self) -> None:
        self._builder.clear()
