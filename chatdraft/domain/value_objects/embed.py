from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class EmbedField:
    """A name/value pair rendered inside an embed."""

    name: str
    value: str
    inline: bool = False


@dataclass(frozen=True)
class Embed:
    """Rich content block attached to a message."""

    title: str | None = None
    description: str | None = None
    url: str | None = None
    color: int | None = None
    fields: tuple[EmbedField, ...] = field(default_factory=tuple)
    footer: str | None = None
    image_url: str | None = None
    thumbnail_url: str | None = None
    author_name: str | None = None
    timestamp: datetime | None = None
