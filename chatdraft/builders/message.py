from typing import Self

from .base import BaseMessageBuilder


class MessageBuilder(BaseMessageBuilder):
    """Builds a new message posted to a channel by the bot."""

    def __init__(self, source=None) -> None:
        super().__init__(source)
        self.reply_id: int | None = None
        self.mention_on_reply = False
        self.fail_on_invalid_reply = False
        self.notifications_suppressed = False
        if isinstance(source, MessageBuilder):
            self.reply_id = source.reply_id
            self.mention_on_reply = source.mention_on_reply
            self.fail_on_invalid_reply = source.fail_on_invalid_reply
            self.notifications_suppressed = source.notifications_suppressed

    def reply_to(
        self,
        message_id: int | None,
        mention: bool = False,
        fail_on_invalid_reply: bool = False,
    ) -> Self:
        """
        Send this message as a reply.

        Args:
            message_id: Message to reply to, or None to stop replying
            mention: Ping the author of the referenced message
            fail_on_invalid_reply: Make the send fail if the referenced
                message no longer exists
        """
        self.reply_id = message_id
        self.mention_on_reply = mention
        self.fail_on_invalid_reply = fail_on_invalid_reply
        return self

    def suppress_notifications(self) -> Self:
        self.notifications_suppressed = True
        return self

    def clear(self) -> None:
        super().clear()
        self.reply_id = None
        self.mention_on_reply = False
        self.fail_on_invalid_reply = False
        self.notifications_suppressed = False
