"""
Shared implementation for all message builder variants.

Each builder owns a MessageDraft and forwards every mutation to it. The
mutators return Self, so chains keep the concrete builder type:

    builder = WebhookBuilder().with_content("deployed").with_username("ci")
"""

from collections.abc import Iterable, Mapping
from typing import BinaryIO, Self

import structlog

from ..domain.entities import MessageDraft
from ..domain.ports import MessageComposer
from ..domain.value_objects import AttachedFile, Component, ComponentRow, Embed, MentionRule
from .composer import DraftComposer

logger = structlog.get_logger()


class BaseMessageBuilder:
    """Fluent builder over a MessageDraft."""

    def __init__(
        self, source: "MessageComposer | BaseMessageBuilder | MessageDraft | None" = None
    ) -> None:
        """
        Args:
            source: Optional builder, composer or draft to copy the content,
                TTS flag, embeds, files, components and mentions from
        """
        if source is None:
            self._draft = MessageDraft()
        else:
            self._draft = MessageDraft.copy_from(source)
            logger.debug(
                "Message draft copied",
                builder=type(self).__name__,
                source=type(source).__name__,
                files=len(self._draft.files),
            )

    @property
    def draft(self) -> MessageDraft:
        return self._draft

    def as_composer(self) -> MessageComposer:
        """Return a MessageComposer view backed by this builder."""
        return DraftComposer(self)

    # Read views

    @property
    def content(self) -> str | None:
        return self._draft.content

    @content.setter
    def content(self, value: str | None) -> None:
        self._draft.content = value

    @property
    def is_tts(self) -> bool:
        return self._draft.is_tts

    @is_tts.setter
    def is_tts(self, value: bool) -> None:
        self._draft.set_text_to_speech(value)

    @property
    def embeds(self) -> tuple[Embed, ...]:
        return self._draft.embeds

    @property
    def files(self) -> tuple[AttachedFile, ...]:
        return self._draft.files

    @property
    def components(self) -> tuple[ComponentRow, ...]:
        return self._draft.components

    @property
    def mentions(self) -> tuple[MentionRule, ...]:
        return self._draft.mentions

    # Chainable mutators

    def with_content(self, content: str | None) -> Self:
        """Set the message text, up to 2000 characters."""
        self._draft.set_content(content)
        return self

    def with_tts(self, is_tts: bool) -> Self:
        self._draft.set_text_to_speech(is_tts)
        return self

    def add_components(self, *components: Component | Iterable[Component]) -> Self:
        """
        Add a row of up to five components; a message holds up to five rows.

        Accepts the components as separate arguments or as one iterable:

            builder.add_components(ok, cancel)
            builder.add_components([ok, cancel])
        """
        if len(components) == 1 and not isinstance(components[0], Component):
            components = tuple(components[0])
        self._draft.add_component_row(components)
        return self

    def add_component_rows(self, rows: Iterable[ComponentRow]) -> Self:
        self._draft.add_component_rows(rows)
        return self

    def add_embed(self, embed: Embed | None) -> Self:
        self._draft.add_embed(embed)
        return self

    def add_embeds(self, embeds: Iterable[Embed]) -> Self:
        self._draft.add_embeds(embeds)
        return self

    def add_file(self, name: str, stream: BinaryIO, reset_position: bool = False) -> Self:
        """
        Attach a file.

        Args:
            name: Name the file is sent as
            stream: Binary stream with the file contents
            reset_position: Ask the transport to seek the stream back to
                its current position once the file is sent
        """
        self._draft.add_file(name, stream, reset_position)
        return self

    def add_file_handle(self, stream: BinaryIO, reset_position: bool = False) -> Self:
        self._draft.add_file_handle(stream, reset_position)
        return self

    def add_files(
        self,
        files: Mapping[str, BinaryIO] | Iterable[AttachedFile],
        reset_position: bool = False,
    ) -> Self:
        self._draft.add_files(files, reset_position)
        return self

    def reattach_files(self, files: Iterable[AttachedFile]) -> Self:
        self._draft.reattach_files(files)
        return self

    def add_mention(self, mention: MentionRule) -> Self:
        self._draft.add_mention(mention)
        return self

    def add_mentions(self, mentions: Iterable[MentionRule]) -> Self:
        self._draft.add_mentions(mentions)
        return self

    def clear_components(self) -> None:
        self._draft.clear_components()

    def clear(self) -> None:
        """Reset the builder so it can be used to send another message."""
        self._draft.clear()
        logger.debug("Message builder cleared", builder=type(self).__name__)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._draft!r})"
