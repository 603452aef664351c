import logging
from dataclasses import dataclass

from ..constants import (
    STATUS_OFFSET_ERROR_INFORMATION_1,
    STATUS_OFFSET_ERROR_INFORMATION_2,
    STATUS_OFFSET_MEDIA_LENGTH,
    STATUS_OFFSET_MEDIA_TYPE,
    STATUS_OFFSET_MEDIA_WIDTH,
    STATUS_OFFSET_MODEL,
    STATUS_OFFSET_STATUS_TYPE,
    STATUS_REPLY_LENGTH,
    STATUS_REPLY_MARKER,
)
from ..exceptions import BrotherQLMalformedReply, BrotherQLUnknownMedia
from ..labels import MediaGeometry, lookup
from ..models import Models
from ..utils.hex import hex_format
from .constants import RESP_BYTE_NAMES, RespMediaTypes, RespStatusTypes
from .errors import check_for_errors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MediaState:
    media_type: RespMediaTypes
    # raw values as reported by the printer, in mm
    width: int
    length: int

    @property
    def is_continuous(self) -> bool:
        return self.length == 0

    def to_geometry(self) -> MediaGeometry:
        """
        :raises BrotherQLUnknownMedia: if the reported dimensions are not in the label geometry table.
        """
        label = lookup(self.width, None if self.is_continuous else self.length)
        if label is None:
            raise BrotherQLUnknownMedia(f"Unknown media loaded in printer: {self.width} x {self.length} mm")
        return label


@dataclass(frozen=True)
class StatusReply:
    model: Models
    status_type: RespStatusTypes
    errors: tuple[str, ...]
    media: MediaState

    @staticmethod
    def from_bytes(data: bytes) -> "StatusReply":
        """
        Decode a status reply. The reply is either accepted as a whole or rejected.

        :raises BrotherQLMalformedReply: if the data isn't exactly 32 bytes long or lacks the print head mark.
        """
        data = bytes(data)

        if len(data) != STATUS_REPLY_LENGTH:
            raise BrotherQLMalformedReply(f"Expected {STATUS_REPLY_LENGTH} bytes, received {len(data)}: {hex_format(data)}")
        if data[0] != STATUS_REPLY_MARKER:
            raise BrotherQLMalformedReply(f"Printer response doesn't start with the print head mark (80): {hex_format(data)}")

        for i, byte_name in enumerate(RESP_BYTE_NAMES):
            logger.debug("Byte %2d %24s %02X", i, byte_name + ":", data[i])

        errors = check_for_errors(data[STATUS_OFFSET_ERROR_INFORMATION_1], data[STATUS_OFFSET_ERROR_INFORMATION_2])
        for error in errors:
            logger.error("Error: %s", error)

        model = Models.from_status_code(data[STATUS_OFFSET_MODEL])
        media_type = RespMediaTypes(data[STATUS_OFFSET_MEDIA_TYPE])
        status_type = RespStatusTypes(data[STATUS_OFFSET_STATUS_TYPE])
        logger.debug("Model: %s, media type: %s, status type: %s", model.identifier, media_type.name, status_type.name)

        return StatusReply(
            model=model,
            status_type=status_type,
            errors=errors,
            media=MediaState(
                media_type=media_type,
                width=data[STATUS_OFFSET_MEDIA_WIDTH],
                length=data[STATUS_OFFSET_MEDIA_LENGTH],
            ),
        )
