"""
Application service for dispatching built messages.

This service hands a builder's state to a transport. It depends on the
MessageTransport port, not on a concrete client.
"""

import structlog

from ...builders import BaseMessageBuilder
from ...config import settings
from ...domain.ports import DeliveryResult, MessageTransport
from ...infrastructure.logging import new_correlation_id

logger = structlog.get_logger()


class MessageDispatchService:
    """
    Sends builders through a transport.

    This service:
    - Passes the builder to the transport through its MessageComposer view
    - Seeks attached streams back to their recorded positions afterwards
    - Logs the outcome

    The builder is not cleared; callers reuse or clear() it themselves.
    """

    def __init__(
        self,
        transport: MessageTransport,
        restore_file_positions: bool | None = None,
    ) -> None:
        """
        Args:
            transport: Implementation of the MessageTransport port
            restore_file_positions: Override settings.restore_file_positions
        """
        self._transport = transport
        if restore_file_positions is None:
            restore_file_positions = settings.restore_file_positions
        self._restore_file_positions = restore_file_positions

    async def dispatch(self, target_id: str, builder: BaseMessageBuilder) -> DeliveryResult:
        """
        Send a message.

        Stream positions are restored even when the transport raises; the
        exception then propagates to the caller.

        Args:
            target_id: Channel, webhook or interaction to send to
            builder: Builder holding the finished message

        Returns:
            DeliveryResult from the transport
        """
        cid = new_correlation_id()
        log = logger.bind(
            dispatch_id=cid,
            target_id=target_id,
            builder=type(builder).__name__,
        )
        log.info(
            "Dispatching message",
            has_content=bool(builder.content),
            embeds=len(builder.embeds),
            files=len(builder.files),
            component_rows=len(builder.components),
        )

        try:
            result = await self._transport.send(target_id, builder.as_composer())
        except Exception as e:
            log.error("Message dispatch raised", error=str(e))
            raise
        finally:
            if self._restore_file_positions:
                self._restore_positions(builder)

        if result.success:
            log.info("Message dispatched", external_id=result.external_id)
        else:
            log.error("Message dispatch failed", error=result.error)

        return result

    @staticmethod
    def _restore_positions(builder: BaseMessageBuilder) -> None:
        for attached in builder.files:
            attached.restore_position()
