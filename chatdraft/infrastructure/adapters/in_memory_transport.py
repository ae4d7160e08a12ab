"""In-memory MessageTransport for development and tests."""

from dataclasses import dataclass, field
from uuid import uuid4

import structlog

from ...domain.ports import DeliveryResult, MessageComposer, MessageTransport
from ...domain.value_objects import ComponentRow, Embed, MentionRule

logger = structlog.get_logger()


@dataclass
class SentMessage:
    """Snapshot of a message as it was handed to the transport."""

    target_id: str
    external_id: str
    content: str | None
    is_tts: bool
    embeds: tuple[Embed, ...]
    components: tuple[ComponentRow, ...]
    mentions: tuple[MentionRule, ...]
    files: dict[str, bytes] = field(default_factory=dict)


class InMemoryTransport(MessageTransport):
    """
    Records every message instead of sending it.

    File streams are read to the end, the way a real upload would, which
    leaves them positioned at EOF until someone restores them.
    """

    def __init__(self) -> None:
        self.sent: list[SentMessage] = []

    async def send(self, target_id: str, message: MessageComposer) -> DeliveryResult:
        external_id = uuid4().hex
        snapshot = SentMessage(
            target_id=target_id,
            external_id=external_id,
            content=message.content,
            is_tts=message.is_tts,
            embeds=message.embeds,
            components=message.components,
            mentions=message.mentions,
            files={f.name: f.stream.read() for f in message.files},
        )
        self.sent.append(snapshot)

        logger.info(
            "Message recorded",
            target_id=target_id,
            external_id=external_id,
            files=len(snapshot.files),
        )
        return DeliveryResult(success=True, target_id=target_id, external_id=external_id)
