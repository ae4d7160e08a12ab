from typing import Self

from ..domain.errors import ValidationError
from .base import BaseMessageBuilder

MAX_USERNAME_LENGTH = 80


class WebhookBuilder(BaseMessageBuilder):
    """Builds a message executed through a webhook, with optional identity overrides."""

    def __init__(self, source=None) -> None:
        super().__init__(source)
        self.username: str | None = None
        self.avatar_url: str | None = None
        self.thread_id: int | None = None
        if isinstance(source, WebhookBuilder):
            self.username = source.username
            self.avatar_url = source.avatar_url
            self.thread_id = source.thread_id

    def with_username(self, username: str) -> Self:
        """Override the webhook's display name for this message."""
        if not 1 <= len(username) <= MAX_USERNAME_LENGTH:
            raise ValidationError(
                f"Webhook username must be between 1 and {MAX_USERNAME_LENGTH} characters",
                field="username",
            )
        self.username = username
        return self

    def with_avatar_url(self, avatar_url: str) -> Self:
        if not avatar_url.startswith("https://"):
            raise ValidationError("Avatar URL must be HTTPS", field="avatar_url")
        self.avatar_url = avatar_url
        return self

    def with_thread_id(self, thread_id: int | None) -> Self:
        """Post into a thread of the webhook's channel."""
        self.thread_id = thread_id
        return self

    def clear(self) -> None:
        super().clear()
        self.username = None
        self.avatar_url = None
        self.thread_id = None
