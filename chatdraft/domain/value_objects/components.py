"""
Interactive message components.

Components are grouped into rows; a message holds at most five rows and a
row holds at most five components.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from ..errors import ValidationError

MAX_ROW_COMPONENTS = 5
MAX_SELECT_OPTIONS = 25


class ButtonStyle(int, Enum):
    """Visual styles for interactive buttons."""

    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4


class Component:
    """Base type for anything that can sit in a component row."""

    __slots__ = ()


@dataclass(frozen=True)
class Button(Component):
    """A button that sends an interaction back to the bot."""

    custom_id: str
    label: str | None = None
    style: ButtonStyle = ButtonStyle.PRIMARY
    disabled: bool = False
    emoji: str | None = None

    def __post_init__(self) -> None:
        if not self.custom_id:
            raise ValidationError("Button custom_id cannot be empty", field="custom_id")
        if not self.label and not self.emoji:
            raise ValidationError("Button needs a label or an emoji", field="label")


@dataclass(frozen=True)
class LinkButton(Component):
    """A button that opens a URL instead of sending an interaction."""

    url: str
    label: str | None = None
    disabled: bool = False
    emoji: str | None = None

    def __post_init__(self) -> None:
        if not self.url.startswith(("https://", "http://")):
            raise ValidationError("Link button URL must be HTTP or HTTPS", field="url")
        if not self.label and not self.emoji:
            raise ValidationError("Link button needs a label or an emoji", field="label")


@dataclass(frozen=True)
class SelectOption:
    label: str
    value: str
    description: str | None = None
    default: bool = False


@dataclass(frozen=True)
class SelectMenu(Component):
    """A dropdown with up to 25 options."""

    custom_id: str
    options: tuple[SelectOption, ...] = field(default_factory=tuple)
    placeholder: str | None = None
    min_values: int = 1
    max_values: int = 1
    disabled: bool = False

    def __post_init__(self) -> None:
        if not self.custom_id:
            raise ValidationError("Select menu custom_id cannot be empty", field="custom_id")
        if not 1 <= len(self.options) <= MAX_SELECT_OPTIONS:
            raise ValidationError(
                f"Select menu must have between 1 and {MAX_SELECT_OPTIONS} options",
                field="options",
            )
        if not 0 <= self.min_values <= self.max_values <= len(self.options):
            raise ValidationError(
                "Select menu value bounds must satisfy 0 <= min <= max <= option count",
                field="max_values",
            )


@dataclass(frozen=True)
class ComponentRow:
    """A horizontal row of one to five components."""

    components: tuple[Component, ...]

    def __post_init__(self) -> None:
        if not self.components:
            raise ValidationError("You must provide at least one component", field="components")
        if len(self.components) > MAX_ROW_COMPONENTS:
            raise ValidationError(
                f"Cannot add more than {MAX_ROW_COMPONENTS} components per row",
                field="components",
            )
        if not all(isinstance(c, Component) for c in self.components):
            raise ValidationError("Component rows can only hold components", field="components")

    @classmethod
    def of(cls, components: Iterable[Component]) -> "ComponentRow":
        """Build a row from any iterable of components."""
        return cls(components=tuple(components))

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self):
        return iter(self.components)
