import io

import pytest

from chatdraft.domain.entities import MessageDraft
from chatdraft.domain.value_objects import Button, Embed, UserMention


@pytest.fixture
def draft() -> MessageDraft:
    return MessageDraft()


@pytest.fixture
def sample_embed() -> Embed:
    return Embed(title="Release", description="v1.2.0 is out")


@pytest.fixture
def sample_button() -> Button:
    return Button(custom_id="approve", label="Approve")


@pytest.fixture
def sample_mention() -> UserMention:
    return UserMention(user_id=42)


@pytest.fixture
def make_stream():
    def _make(data: bytes = b"payload") -> io.BytesIO:
        return io.BytesIO(data)

    return _make


@pytest.fixture
def populated_draft(draft, sample_embed, sample_button, sample_mention, make_stream) -> MessageDraft:
    draft.set_content("hi")
    draft.set_text_to_speech(True)
    draft.add_embed(sample_embed)
    draft.add_file("report.txt", make_stream())
    draft.add_component_row([sample_button])
    draft.add_mention(sample_mention)
    return draft
