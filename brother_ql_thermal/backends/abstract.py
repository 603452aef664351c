import logging
from abc import ABC, abstractmethod

from ..constants import STATUS_REPLY_LENGTH

logger = logging.getLogger(__name__)


class BaseBrotherQLBackend(ABC):
    """
    A byte transport to a single printer.

    Reads and writes block until they complete or their timeout expires, in which case
    :py:class:`~brother_ql_thermal.exceptions.BrotherQLTransportError` is raised.
    The device accepts one command stream at a time: a backend must not be shared between
    concurrent print jobs.
    """

    @abstractmethod
    def _read(self, length: int) -> bytes:
        pass

    @abstractmethod
    def _write(self, data: bytes) -> None:
        pass

    @abstractmethod
    def _dispose(self) -> None:
        pass

    def read(self, length: int = STATUS_REPLY_LENGTH) -> bytes:
        try:
            ret_bytes = self._read(length)
        except Exception as e:
            logger.debug("Error reading... %s", e)
            raise
        logger.debug("Read %d bytes.", len(ret_bytes))
        return ret_bytes

    def write(self, data: bytes) -> None:
        logger.debug("Writing %d bytes.", len(data))
        self._write(data)

    def dispose(self) -> None:
        try:
            self._dispose()
        except NotImplementedError:
            pass

    def __enter__(self) -> "BaseBrotherQLBackend":
        return self

    def __exit__(self, *exc_info) -> None:
        self.dispose()

    @staticmethod
    @abstractmethod
    def list_available_devices() -> list[str]:
        """List all available devices (by Identifier) for the Backend"""
        pass
