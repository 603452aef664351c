"""
Encoders for the instructions of the Brother QL raster command language.

Every function returns the complete bytes of a single instruction.
"""

import struct

from .constants import (
    AUTOCUT_FLAG,
    CMD_EXPANDED_MODE,
    CMD_INITIALIZE,
    CMD_INVALIDATE,
    CMD_MARGINS,
    CMD_MEDIA_AND_QUALITY,
    CMD_PRINT_FINAL,
    CMD_RASTER_LINE,
    CMD_STATUS_REQUEST,
    CMD_SWITCH_MODE,
    CMD_VARIOUS_MODE,
    CUT_AT_END_FLAG,
    MEDIA_VALID_FLAGS,
    RASTER_LINE_BYTES,
    RASTER_MODE,
)
from .exceptions import BrotherQLRasterError


def invalidate() -> bytes:
    """clear command buffer"""
    return CMD_INVALIDATE


def initialize() -> bytes:
    return CMD_INITIALIZE


def status_request() -> bytes:
    """Status Information Request"""
    return CMD_STATUS_REQUEST


def switch_mode() -> bytes:
    """
    Switch dynamic command mode
    Switch to the raster mode on the printers that support
    the mode change (others are in raster mode already).
    """
    return CMD_SWITCH_MODE + bytes([RASTER_MODE])


def media_and_quality(media_type: int, width: int, length: int, line_count: int) -> bytes:
    """
    Print information command.

    :param int media_type: 0x0A for continuous tape, 0x0B for die-cut labels
    :param int width: media width in mm as reported by the printer
    :param int length: media length in mm as reported by the printer, 0 for continuous tape
    :param int line_count: number of raster lines that will follow
    """
    data = CMD_MEDIA_AND_QUALITY
    data += bytes([MEDIA_VALID_FLAGS, media_type & 0xFF, width & 0xFF, length & 0xFF])
    data += struct.pack("<L", line_count)
    # starting page, then a reserved byte
    data += b"\x01\x00"
    return data


def media_line_count(instruction: bytes) -> int:
    """Parse the raster line count back out of a media/quality instruction."""
    offset = len(CMD_MEDIA_AND_QUALITY) + 4
    return struct.unpack("<L", instruction[offset : offset + 4])[0]


def autocut() -> bytes:
    """Autocut"""
    return CMD_VARIOUS_MODE + bytes([AUTOCUT_FLAG])


def expanded_mode() -> bytes:
    """Expanded Mode: cut at the end of the job, high resolution printing disabled"""
    return CMD_EXPANDED_MODE + bytes([CUT_AT_END_FLAG])


def margins(dots: int) -> bytes:
    return CMD_MARGINS + struct.pack("<H", dots)


def raster_line(line: bytes) -> bytes:
    """
    :raises BrotherQLRasterError: if the line doesn't have the width of the print head.
    """
    if len(line) != RASTER_LINE_BYTES:
        fmt = "Wrong raster line width: {}, expected {}"
        raise BrotherQLRasterError(fmt.format(len(line), RASTER_LINE_BYTES))
    return CMD_RASTER_LINE + bytes([RASTER_LINE_BYTES]) + bytes(line)


def print_final() -> bytes:
    return CMD_PRINT_FINAL
