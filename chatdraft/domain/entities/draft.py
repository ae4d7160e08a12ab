"""
MessageDraft: the accumulated, not-yet-sent state of an outbound message.

The draft validates every mutation against the platform limits and leaves
itself unchanged when a mutation is rejected. The one exception is
add_files() over a mapping, see its docstring.
"""

import os
from collections.abc import Iterable, Mapping
from typing import Any, BinaryIO

from ..errors import ValidationError
from ..value_objects import (
    AttachedFile,
    Component,
    ComponentRow,
    Embed,
    MentionRule,
)

MAX_CONTENT_LENGTH = 2000
MAX_FILES = 10
MAX_COMPONENT_ROWS = 5


class MessageDraft:
    """Mutable message state shared by every builder variant."""

    def __init__(self) -> None:
        self._content: str | None = None
        self.is_tts: bool = False
        self._embeds: list[Embed] = []
        self._files: list[AttachedFile] = []
        self._components: list[ComponentRow] = []
        self._mentions: list[MentionRule] = []

    @classmethod
    def copy_from(cls, source: Any) -> "MessageDraft":
        """
        Create a draft holding the same state as another draft or builder.

        The lists are copied, their elements are shared. File stream
        positions are left alone: callers that read from an attached
        stream must seek it back before the copy is sent.

        Args:
            source: Anything exposing content, is_tts, embeds, files,
                components and mentions

        Returns:
            A new, independent draft
        """
        draft = cls()
        draft._content = source.content
        draft.is_tts = source.is_tts
        draft._embeds.extend(source.embeds)
        draft._files.extend(source.files)
        draft._components.extend(source.components)
        draft._mentions.extend(source.mentions)
        return draft

    # Read views

    @property
    def content(self) -> str | None:
        return self._content

    @content.setter
    def content(self, value: str | None) -> None:
        if value is not None and len(value) > MAX_CONTENT_LENGTH:
            raise ValidationError(
                f"Content length cannot exceed {MAX_CONTENT_LENGTH} characters",
                field="content",
            )
        self._content = value

    @property
    def embeds(self) -> tuple[Embed, ...]:
        return tuple(self._embeds)

    @property
    def files(self) -> tuple[AttachedFile, ...]:
        return tuple(self._files)

    @property
    def components(self) -> tuple[ComponentRow, ...]:
        return tuple(self._components)

    @property
    def mentions(self) -> tuple[MentionRule, ...]:
        return tuple(self._mentions)

    # Mutations

    def set_content(self, text: str | None) -> None:
        self.content = text

    def set_text_to_speech(self, flag: bool) -> None:
        self.is_tts = flag

    def add_component_row(self, components: Iterable[Component]) -> None:
        """
        Wrap up to five components into a new row.

        Raises:
            ValidationError: No components, more than five, or the message
                already has the maximum number of rows
        """
        row = ComponentRow.of(components)
        if len(self._components) >= MAX_COMPONENT_ROWS:
            raise ValidationError(
                f"Component row count exceeds maximum of {MAX_COMPONENT_ROWS}",
                field="components",
            )
        self._components.append(row)

    def add_component_rows(self, rows: Iterable[ComponentRow]) -> None:
        rows = list(rows)
        if not all(isinstance(row, ComponentRow) for row in rows):
            raise ValidationError("Expected ComponentRow instances", field="components")
        if len(self._components) + len(rows) > MAX_COMPONENT_ROWS:
            raise ValidationError(
                f"Component row count exceeds maximum of {MAX_COMPONENT_ROWS}",
                field="components",
            )
        self._components.extend(rows)

    def clear_components(self) -> None:
        self._components.clear()

    def add_embed(self, embed: Embed | None) -> None:
        # None is a no-op, the platform rejects null embeds
        if embed is None:
            return
        self._embeds.append(embed)

    def add_embeds(self, embeds: Iterable[Embed]) -> None:
        self._embeds.extend(embeds)

    def add_file(self, name: str, stream: BinaryIO, reset_position: bool = False) -> None:
        """
        Attach a stream under the given file name.

        Args:
            name: File name shown to recipients, unique within the message
            stream: Binary stream with the file contents
            reset_position: Record the current stream offset so the
                transport can seek back to it after sending

        Raises:
            ValidationError: Ten files are already attached or the name is
                taken
        """
        self._check_file_capacity(1)
        self._check_file_name(name)
        self._files.append(self._attach(name, stream, reset_position))

    def add_file_handle(self, stream: BinaryIO, reset_position: bool = False) -> None:
        """Attach an open file object under its own base name."""
        name = getattr(stream, "name", None)
        if not isinstance(name, str) or not name:
            raise ValidationError("Stream has no file name to attach it under", field="files")
        self.add_file(os.path.basename(name), stream, reset_position)

    def add_files(
        self,
        files: Mapping[str, BinaryIO] | Iterable[AttachedFile],
        reset_position: bool = False,
    ) -> None:
        """
        Attach several files at once.

        A mapping of name to stream goes through the same checks as
        add_file(). The capacity check covers the whole batch up front, but
        names are checked one by one: if a later name is a duplicate, the
        entries before it stay attached.

        Any other iterable is taken as previously attached files and is
        appended without name or capacity checks (see reattach_files()).

        Raises:
            ValidationError: The batch would exceed ten files, or a name is
                taken
        """
        if not isinstance(files, Mapping):
            self.reattach_files(files)
            return

        self._check_file_capacity(len(files))
        for name, stream in files.items():
            self._check_file_name(name)
            self._files.append(self._attach(name, stream, reset_position))

    def reattach_files(self, files: Iterable[AttachedFile]) -> None:
        """
        Append files taken from another message.

        Names and capacity are not re-checked, but every entry must be an
        AttachedFile.
        """
        files = list(files)
        if not all(isinstance(f, AttachedFile) for f in files):
            raise ValidationError("Expected AttachedFile instances", field="files")
        self._files.extend(files)

    def add_mention(self, mention: MentionRule) -> None:
        self._mentions.append(mention)

    def add_mentions(self, mentions: Iterable[MentionRule]) -> None:
        self._mentions.extend(mentions)

    def clear(self) -> None:
        """Reset the draft so it can be reused for another message."""
        self._content = ""
        self._embeds.clear()
        self.is_tts = False
        self._mentions.clear()
        self._files.clear()
        self._components.clear()

    def _check_file_capacity(self, incoming: int) -> None:
        if len(self._files) + incoming > MAX_FILES:
            raise ValidationError(
                f"Cannot send more than {MAX_FILES} files with a single message",
                field="files",
            )

    def _check_file_name(self, name: str) -> None:
        if any(f.name == name for f in self._files):
            raise ValidationError(f"A file named {name!r} is already attached", field="files")

    @staticmethod
    def _attach(name: str, stream: BinaryIO, reset_position: bool) -> AttachedFile:
        position = stream.tell() if reset_position else None
        return AttachedFile(name=name, stream=stream, reset_position_to=position)

    def __repr__(self) -> str:
        return (
            f"MessageDraft(content_length={len(self._content or '')}, tts={self.is_tts}, "
            f"embeds={len(self._embeds)}, files={len(self._files)}, "
            f"rows={len(self._components)}, mentions={len(self._mentions)})"
        )
