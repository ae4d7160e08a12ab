import io

import pytest

from chatdraft.domain.errors import ValidationError
from chatdraft.domain.value_objects import (
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


class TestAttachedFile:
    def test_restore_position(self):
        stream = io.BytesIO(b"0123456789")
        attached = AttachedFile(name="a.bin", stream=stream, reset_position_to=2)
        stream.read()

        attached.restore_position()

        assert stream.tell() == 2

    def test_restore_without_recorded_position_is_noop(self):
        stream = io.BytesIO(b"0123456789")
        attached = AttachedFile(name="a.bin", stream=stream)
        stream.read()

        attached.restore_position()

        assert stream.tell() == 10
        assert attached.resets_position is False

    def test_attached_file_is_immutable(self):
        attached = AttachedFile(name="a.bin", stream=io.BytesIO())

        with pytest.raises(AttributeError):
            attached.name = "b.bin"


class TestButtons:
    def test_create_button(self):
        button = Button(custom_id="ok", label="OK", style=ButtonStyle.SUCCESS)

        assert button.custom_id == "ok"
        assert button.style == ButtonStyle.SUCCESS
        assert button.disabled is False

    def test_button_with_emoji_only(self):
        button = Button(custom_id="thumbs", emoji="👍")

        assert button.label is None

    def test_button_without_custom_id_raises_error(self):
        with pytest.raises(ValidationError, match="custom_id"):
            Button(custom_id="", label="OK")

    def test_button_without_label_or_emoji_raises_error(self):
        with pytest.raises(ValidationError, match="label or an emoji"):
            Button(custom_id="ok")

    def test_link_button(self):
        button = LinkButton(url="https://example.com", label="Docs")

        assert button.url == "https://example.com"

    def test_link_button_rejects_other_schemes(self):
        with pytest.raises(ValidationError, match="HTTP or HTTPS"):
            LinkButton(url="ftp://example.com", label="Docs")


class TestSelectMenu:
    def test_create_select_menu(self):
        menu = SelectMenu(
            custom_id="color",
            options=(SelectOption(label="Red", value="red"), SelectOption(label="Blue", value="blue")),
            max_values=2,
        )

        assert len(menu.options) == 2

    def test_select_menu_needs_options(self):
        with pytest.raises(ValidationError, match="between 1 and 25 options"):
            SelectMenu(custom_id="color")

    def test_select_menu_rejects_26_options(self):
        options = tuple(SelectOption(label=str(i), value=str(i)) for i in range(26))

        with pytest.raises(ValidationError, match="between 1 and 25 options"):
            SelectMenu(custom_id="many", options=options)

    def test_select_menu_value_bounds(self):
        with pytest.raises(ValidationError, match="value bounds"):
            SelectMenu(
                custom_id="color",
                options=(SelectOption(label="Red", value="red"),),
                max_values=2,
            )


class TestComponentRow:
    def test_row_of_iterable(self):
        buttons = [Button(custom_id=f"b{i}", label=str(i)) for i in range(3)]

        row = ComponentRow.of(iter(buttons))

        assert len(row) == 3
        assert list(row) == buttons

    def test_empty_row_raises_error(self):
        with pytest.raises(ValidationError, match="at least one component"):
            ComponentRow(components=())

    def test_row_over_five_raises_error(self):
        buttons = tuple(Button(custom_id=f"b{i}", label=str(i)) for i in range(6))

        with pytest.raises(ValidationError, match="more than 5"):
            ComponentRow(components=buttons)


class TestEmbed:
    def test_embed_defaults(self):
        embed = Embed()

        assert embed.title is None
        assert embed.fields == ()

    def test_embed_with_fields(self):
        embed = Embed(
            title="Status",
            fields=(EmbedField(name="CPU", value="12%", inline=True),),
            color=0x00FF00,
        )

        assert embed.fields[0].inline is True
        assert embed.color == 0x00FF00


class TestMentions:
    def test_user_mention_defaults_to_everyone(self):
        assert UserMention().user_id is None

    def test_mentions_compare_by_value(self):
        assert UserMention(user_id=1) == UserMention(user_id=1)
        assert RoleMention(role_id=1) != RoleMention(role_id=2)
        assert EveryoneMention() == EveryoneMention()

    def test_all_rule_set(self):
        assert RepliedUserMention() in Mentions.ALL
        assert len(Mentions.ALL) == 4
        assert Mentions.NONE == ()


class TestComponentRowElements:
    def test_row_rejects_non_components(self):
        with pytest.raises(ValidationError, match="only hold components"):
            ComponentRow(components=(["not", "a", "component"],))

    def test_row_rejects_nested_empty_list(self):
        with pytest.raises(ValidationError, match="only hold components"):
            ComponentRow(components=([],))
