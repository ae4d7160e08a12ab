"""Message builders for a chat-platform API client."""

__version__ = "0.1.0"

from .builders import (
    BaseMessageBuilder,
    DraftComposer,
    FollowupMessageBuilder,
    InteractionResponseBuilder,
    MessageBuilder,
    WebhookBuilder,
)
from .domain.entities import MessageDraft
from .domain.errors import ValidationError
from .domain.ports import DeliveryResult, MessageComposer, MessageTransport
from .domain.value_objects import (
    AttachedFile,
    Button,
    ButtonStyle,
    ComponentRow,
    Embed,
    EmbedField,
    EveryoneMention,
    LinkButton,
    Mentions,
    RepliedUserMention,
    RoleMention,
    SelectMenu,
    SelectOption,
    UserMention,
)

__all__ = [
    "AttachedFile",
    "BaseMessageBuilder",
    "Button",
    "ButtonStyle",
    "ComponentRow",
    "DeliveryResult",
    "DraftComposer",
    "Embed",
    "EmbedField",
    "EveryoneMention",
    "FollowupMessageBuilder",
    "InteractionResponseBuilder",
    "LinkButton",
    "Mentions",
    "MessageBuilder",
    "MessageComposer",
    "MessageDraft",
    "MessageTransport",
    "RepliedUserMention",
    "RoleMention",
    "SelectMenu",
    "SelectOption",
    "UserMention",
    "ValidationError",
    "WebhookBuilder",
]
