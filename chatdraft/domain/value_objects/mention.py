"""
Allowed-mention rules.

A rule tells the platform which mentions in the message content actually
notify someone. An id of None widens the rule to every user (or role).
"""

from dataclasses import dataclass


class MentionRule:
    """Base type for all allowed-mention rules."""

    __slots__ = ()


@dataclass(frozen=True)
class UserMention(MentionRule):
    user_id: int | None = None


@dataclass(frozen=True)
class RoleMention(MentionRule):
    role_id: int | None = None


@dataclass(frozen=True)
class EveryoneMention(MentionRule):
    """Allows @everyone and @here."""


@dataclass(frozen=True)
class RepliedUserMention(MentionRule):
    """Pings the author of the message being replied to."""


class Mentions:
    """Common rule sets."""

    ALL: tuple[MentionRule, ...] = (
        UserMention(),
        RoleMention(),
        EveryoneMention(),
        RepliedUserMention(),
    )
    NONE: tuple[MentionRule, ...] = ()
