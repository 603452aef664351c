"""
Talking to a Brother QL printer: status queries and print jobs.

The central piece of code in this module is the class
:py:class:`BrotherQLPrinter`.
"""

import logging
import threading
import time
from collections.abc import Sequence

from . import instructions
from .backends import BaseBrotherQLBackend
from .constants import MEDIA_TYPE_CONTINUOUS, MEDIA_TYPE_DIE_CUT, STATUS_POLL_INTERVAL, STATUS_REPLY_LENGTH
from .control.constants import RespMediaTypes, RespStatusTypes
from .control.op_codes import match_opcode
from .control.response import StatusReply
from .control.state import PrinterState
from .exceptions import BrotherQLCancelled, BrotherQLError, BrotherQLNoMediaLoaded, BrotherQLTimeout
from .labels import MediaGeometry

logger = logging.getLogger(__name__)

MEDIA_TYPE_CODES = {
    RespMediaTypes.CONTINUOUS_LENGTH_TAPE: MEDIA_TYPE_CONTINUOUS,
    RespMediaTypes.DIE_CUT_LABELS: MEDIA_TYPE_DIE_CUT,
}


class BrotherQLPrinter:
    """
    Drives a printer through a backend: every instruction is written on its own,
    status replies are read back where the protocol provides one.

    The printer handles a single command stream at a time. Only one job may be in flight
    per backend; callers sharing a printer between threads have to serialize access.

    :param backend: An opened backend connected to the printer.

    :ivar str model: Identifier of the model, known after :py:meth:`initialize`.
    :ivar PrinterState state: The step the current (or last) print job has reached.
    """

    def __init__(self, backend: BaseBrotherQLBackend) -> None:
        self.backend = backend
        self.model = None
        self.state = PrinterState.IDLE

    def _write(self, instruction: bytes) -> None:
        logger.debug("Sending %s instruction (%d bytes)", match_opcode(instruction).name, len(instruction))
        self.backend.write(instruction)

    def _advance(self, state: PrinterState) -> None:
        logger.debug("Print job: %s -> %s", self.state.name, state.name)
        self.state = state

    def initialize(self) -> StatusReply:
        """Reset the printer, bringing it out of any partially received command, and learn its model."""
        self._write(instructions.invalidate())
        self._write(instructions.initialize())
        status = self.get_status()
        self.model = status.model.identifier
        logger.info("Connected to a %s", self.model)
        return status

    def read_status(self) -> StatusReply:
        return StatusReply.from_bytes(self.backend.read(STATUS_REPLY_LENGTH))

    def get_status(self) -> StatusReply:
        """Get the current status of the printer including possible errors, media type, and model name."""
        self._write(instructions.status_request())
        return self.read_status()

    def current_label(self) -> MediaGeometry:
        """
        Get the geometry of the currently loaded label media.

        :raises BrotherQLUnknownMedia: if the loaded media is not in the label geometry table.
        """
        return self.get_status().media.to_geometry()

    def print(self, lines: Sequence[bytes]) -> StatusReply:
        """
        Send raster lines to the printer, start printing, and return immediately.

        The lines have to be given in the order they are fed through the printer. The returned
        status is whatever the printer replies right after the print instruction, usually not yet
        the completion.

        :raises BrotherQLRasterError: if a line doesn't match the width of the print head. Nothing is sent then.
        :raises BrotherQLNoMediaLoaded: if no media is loaded. Only the status request is sent then.
        :raises BrotherQLUnknownMedia: if the loaded media is unknown. Only the status request is sent then.
        """
        self.state = PrinterState.IDLE
        try:
            return self._print(lines)
        except BrotherQLError:
            self._advance(PrinterState.ERRORED)
            raise

    def _print(self, lines: Sequence[bytes]) -> StatusReply:
        raster_instructions = [instructions.raster_line(line) for line in lines]

        status = self.get_status()
        self._advance(PrinterState.STATUS_QUERIED)
        media = status.media
        if media.media_type not in MEDIA_TYPE_CODES:
            raise BrotherQLNoMediaLoaded("No media loaded into printer")
        label = media.to_geometry()
        logger.info("Printing %d raster lines on %s label", len(raster_instructions), label.identifier)

        self._write(instructions.switch_mode())
        self._advance(PrinterState.MODE_SET)

        self._write(instructions.media_and_quality(MEDIA_TYPE_CODES[media.media_type], media.width, media.length, len(raster_instructions)))
        self._advance(PrinterState.MEDIA_DESCRIBED)

        self._write(instructions.autocut())
        self._write(instructions.expanded_mode())
        self._advance(PrinterState.SETTINGS_APPLIED)

        self._write(instructions.margins(label.feed_margin))
        self._advance(PrinterState.MARGINS_SET)

        for raster_instruction in raster_instructions:
            self.backend.write(raster_instruction)
        self._advance(PrinterState.LINES_SENT)

        self._write(instructions.print_final())
        self._advance(PrinterState.TRIGGERED)

        return self.read_status()

    def print_blocking(
        self,
        lines: Sequence[bytes],
        timeout: float | None = None,
        cancel: threading.Event | None = None,
        poll_interval: float = STATUS_POLL_INTERVAL,
    ) -> StatusReply:
        """
        Same as :py:meth:`print` but will not return until the printer reports that it has finished printing.

        Status replies other than 'printing completed', including error replies, don't end the wait.
        Without a timeout or cancel event this blocks for as long as the printer doesn't finish.

        :param float timeout: Give up waiting after this many seconds.
        :param threading.Event cancel: Give up waiting as soon as this event is set.
        :param float poll_interval: Seconds between two status reads.
        :raises BrotherQLTimeout: if the timeout expired. The printer is left mid-job.
        :raises BrotherQLCancelled: if the cancel event was set. The printer is left mid-job.
        """
        start = time.time()
        self.print(lines)
        self._advance(PrinterState.AWAITING_COMPLETION)

        while True:
            if cancel is not None and cancel.is_set():
                self._advance(PrinterState.ERRORED)
                raise BrotherQLCancelled("Waiting for the print to complete was cancelled")
            if timeout is not None and time.time() - start > timeout:
                self._advance(PrinterState.ERRORED)
                raise BrotherQLTimeout(f"Printing didn't complete within {timeout:.1f} s")
            try:
                status = self.read_status()
            except BrotherQLError as e:
                logger.debug("TIME %.3f - no status: %s", time.time() - start, e)
            else:
                logger.debug("TIME %.3f - status: %s", time.time() - start, status.status_type.name)
                if status.status_type == RespStatusTypes.PRINTING_COMPLETED:
                    self._advance(PrinterState.DONE)
                    logger.info("Printing completed.")
                    return status
                if status.errors:
                    logger.warning("Printer reported errors while printing: %s", ", ".join(status.errors))
            time.sleep(poll_interval)
