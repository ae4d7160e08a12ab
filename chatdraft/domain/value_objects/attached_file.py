from dataclasses import dataclass
from typing import BinaryIO


@dataclass(frozen=True)
class AttachedFile:
    """A file to upload alongside a message.

    The stream is held by reference only; nothing is read until the
    transport encodes the upload.
    """

    name: str
    stream: BinaryIO
    reset_position_to: int | None = None

    @property
    def resets_position(self) -> bool:
        return self.reset_position_to is not None

    def restore_position(self) -> None:
        """Seek the stream back to where it was when it was attached."""
        if self.reset_position_to is not None:
            self.stream.seek(self.reset_position_to)
