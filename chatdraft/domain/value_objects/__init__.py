from .attached_file import AttachedFile
from .components import (
    MAX_ROW_COMPONENTS,
    Button,
    ButtonStyle,
    Component,
    ComponentRow,
    LinkButton,
    SelectMenu,
    SelectOption,
)
from .embed import Embed, EmbedField
from .mention import (
    EveryoneMention,
    MentionRule,
    Mentions,
    RepliedUserMention,
    RoleMention,
    UserMention,
)

__all__ = [
    "MAX_ROW_COMPONENTS",
    "AttachedFile",
    "Button",
    "ButtonStyle",
    "Component",
    "ComponentRow",
    "Embed",
    "EmbedField",
    "EveryoneMention",
    "LinkButton",
    "MentionRule",
    "Mentions",
    "RepliedUserMention",
    "RoleMention",
    "SelectMenu",
    "SelectOption",
    "UserMention",
]
