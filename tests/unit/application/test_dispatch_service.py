from unittest.mock import AsyncMock

import pytest

from chatdraft.application.services import MessageDispatchService
from chatdraft.builders import MessageBuilder, WebhookBuilder
from chatdraft.domain.ports import DeliveryResult, MessageComposer
from chatdraft.infrastructure.adapters import InMemoryTransport


class TestMessageDispatchService:
    @pytest.fixture
    def transport(self):
        return InMemoryTransport()

    @pytest.fixture
    def service(self, transport):
        return MessageDispatchService(transport, restore_file_positions=True)

    @pytest.mark.asyncio
    async def test_dispatch_success(self, service, transport, sample_embed):
        builder = MessageBuilder().with_content("Hello!").add_embed(sample_embed)

        result = await service.dispatch("channel-1", builder)

        assert result.success is True
        assert result.target_id == "channel-1"
        assert transport.sent[0].content == "Hello!"
        assert transport.sent[0].embeds == (sample_embed,)

    @pytest.mark.asyncio
    async def test_dispatch_passes_composer_view(self):
        transport = AsyncMock()
        transport.send.return_value = DeliveryResult(success=True, external_id="m-1")
        service = MessageDispatchService(transport)
        builder = WebhookBuilder().with_content("hi")

        await service.dispatch("hook-1", builder)

        target_id, message = transport.send.await_args.args
        assert target_id == "hook-1"
        assert isinstance(message, MessageComposer)
        assert message.content == "hi"

    @pytest.mark.asyncio
    async def test_dispatch_restores_requested_positions(self, service, make_stream):
        restored = make_stream(b"0123456789")
        restored.seek(2)
        untouched = make_stream(b"abcdef")
        builder = (
            MessageBuilder()
            .add_file("restored.bin", restored, reset_position=True)
            .add_file("untouched.bin", untouched)
        )

        await service.dispatch("channel-1", builder)

        assert restored.tell() == 2
        assert untouched.tell() == 6

    @pytest.mark.asyncio
    async def test_dispatch_without_restore(self, transport, make_stream):
        service = MessageDispatchService(transport, restore_file_positions=False)
        stream = make_stream(b"0123456789")
        builder = MessageBuilder().add_file("a.bin", stream, reset_position=True)

        await service.dispatch("channel-1", builder)

        assert stream.tell() == 10

    @pytest.mark.asyncio
    async def test_dispatch_restores_positions_when_transport_raises(self, make_stream):
        stream = make_stream(b"0123456789")

        async def failing_send(target_id, message):
            message.files[0].stream.read()
            raise ConnectionError("socket closed")

        transport = AsyncMock()
        transport.send.side_effect = failing_send
        service = MessageDispatchService(transport, restore_file_positions=True)
        builder = MessageBuilder().add_file("a.bin", stream, reset_position=True)

        with pytest.raises(ConnectionError):
            await service.dispatch("channel-1", builder)

        assert stream.tell() == 0

    @pytest.mark.asyncio
    async def test_dispatch_failure_result_is_returned(self):
        transport = AsyncMock()
        transport.send.return_value = DeliveryResult(success=False, error="HTTP 429")
        service = MessageDispatchService(transport)

        result = await service.dispatch("channel-1", MessageBuilder().with_content("hi"))

        assert result.success is False
        assert result.error == "HTTP 429"

    @pytest.mark.asyncio
    async def test_dispatch_does_not_clear_builder(self, service):
        builder = MessageBuilder().with_content("keep me")

        await service.dispatch("channel-1", builder)

        assert builder.content == "keep me"

    @pytest.mark.asyncio
    async def test_resend_after_restore(self, service, transport, make_stream):
        builder = MessageBuilder().add_file("a.txt", make_stream(b"data"), reset_position=True)

        await service.dispatch("channel-1", builder)
        await service.dispatch("channel-2", builder)

        assert transport.sent[0].files == {"a.txt": b"data"}
        assert transport.sent[1].files == {"a.txt": b"data"}
