"""Pytest configuration and fixtures."""

import pytest
from PIL import ImageFont

from brother_ql_thermal.backends import BaseBrotherQLBackend
from brother_ql_thermal.exceptions import BrotherQLTransportError


class ScriptedBackend(BaseBrotherQLBackend):
    """In-memory backend replaying prepared replies and recording everything written."""

    def __init__(self, replies=()):
        self.replies = list(replies)
        self.written: list[bytes] = []
        self.disposed = False

    def _read(self, length: int) -> bytes:
        if not self.replies:
            raise BrotherQLTransportError("Read timed out")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def _write(self, data: bytes) -> None:
        self.written.append(bytes(data))

    def _dispose(self) -> None:
        self.disposed = True

    @staticmethod
    def list_available_devices() -> list[str]:
        return []

    @property
    def stream(self) -> bytes:
        return b"".join(self.written)


def build_status(
    model: int = 0x35,
    error_info_1: int = 0x00,
    error_info_2: int = 0x00,
    width: int = 29,
    media_type: int = 0x0A,
    length: int = 0,
    status_type: int = 0x00,
) -> bytes:
    data = bytearray(32)
    data[0:3] = b"\x80\x20\x42"
    data[4] = model
    data[8] = error_info_1
    data[9] = error_info_2
    data[10] = width
    data[11] = media_type
    data[17] = length
    data[18] = status_type
    return bytes(data)


@pytest.fixture
def make_status():
    """Build a 32 byte status reply, by default a QL-700 with 29mm continuous tape."""
    return build_status


@pytest.fixture
def make_backend():
    """Create a scripted backend from a list of replies."""
    return ScriptedBackend


@pytest.fixture
def font_loader():
    """Load Pillow's bundled FreeType font at a given size."""
    return lambda size: ImageFont.load_default(size)
