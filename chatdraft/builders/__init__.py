from .base import BaseMessageBuilder
from .composer import DraftComposer
from .followup import FollowupMessageBuilder
from .interaction_response import InteractionResponseBuilder
from .message import MessageBuilder
from .webhook import WebhookBuilder

__all__ = [
    "BaseMessageBuilder",
    "DraftComposer",
    "FollowupMessageBuilder",
    "InteractionResponseBuilder",
    "MessageBuilder",
    "WebhookBuilder",
]
