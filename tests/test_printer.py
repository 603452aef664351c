"""Tests for printing through a backend."""

import threading

import pytest

from brother_ql_thermal import instructions
from brother_ql_thermal.control.constants import RespStatusTypes
from brother_ql_thermal.control.op_codes import chunker, match_opcode
from brother_ql_thermal.control.state import PrinterState
from brother_ql_thermal.exceptions import (
    BrotherQLCancelled,
    BrotherQLMalformedReply,
    BrotherQLNoMediaLoaded,
    BrotherQLRasterError,
    BrotherQLTimeout,
    BrotherQLTransportError,
    BrotherQLUnknownMedia,
)
from brother_ql_thermal.labels import lookup
from brother_ql_thermal.printer import BrotherQLPrinter


def opcode_names(stream: bytes) -> list[str]:
    return [match_opcode(instruction).name for instruction in chunker(stream)]


class TestStatus:
    """Tests for status queries."""

    def test_get_status(self, make_backend, make_status):
        backend = make_backend([make_status()])
        status = BrotherQLPrinter(backend).get_status()

        assert backend.written == [instructions.status_request()]
        assert status.model.identifier == "QL-700"

    def test_initialize(self, make_backend, make_status):
        backend = make_backend([make_status(model=0x34)])
        printer = BrotherQLPrinter(backend)
        printer.initialize()

        assert backend.written == [bytes(200), b"\x1b\x40", b"\x1b\x69\x53"]
        assert printer.model == "QL-1060N"

    def test_current_label(self, make_backend, make_status):
        backend = make_backend([make_status(media_type=0x0B, width=62, length=100)])
        assert BrotherQLPrinter(backend).current_label() == lookup(62, 100)

    def test_current_label_unknown(self, make_backend, make_status):
        backend = make_backend([make_status(width=30)])
        with pytest.raises(BrotherQLUnknownMedia):
            BrotherQLPrinter(backend).current_label()

    def test_malformed_reply(self, make_backend, make_status):
        backend = make_backend([make_status()[:31]])
        with pytest.raises(BrotherQLMalformedReply):
            BrotherQLPrinter(backend).get_status()

    def test_transport_error_is_raised(self, make_backend):
        with pytest.raises(BrotherQLTransportError):
            BrotherQLPrinter(make_backend()).get_status()


class TestPrint:
    """Tests for BrotherQLPrinter.print."""

    def test_zero_lines(self, make_backend, make_status):
        """An empty job still describes the media, with a line count of zero."""
        backend = make_backend([make_status(), make_status(status_type=0x06)])
        printer = BrotherQLPrinter(backend)
        printer.print([])

        assert opcode_names(backend.stream) == [
            "status request",
            "mode setting",
            "media/quality",
            "various",
            "expanded",
            "margins",
            "print",
        ]
        media = backend.written[2]
        assert media[7:11] == b"\x00\x00\x00\x00"
        assert backend.written[-2] == instructions.margins(35)
        assert printer.state == PrinterState.TRIGGERED

    def test_lines_in_order(self, make_backend, make_status):
        lines = [bytes([0, i]) + bytes(88) for i in range(3)]
        backend = make_backend([make_status(media_type=0x0B, width=29, length=90), make_status()])
        BrotherQLPrinter(backend).print(lines)

        assert backend.written[2] == instructions.media_and_quality(0x0B, 29, 90, 3)
        assert backend.written[5] == instructions.margins(0)
        assert backend.written[6:9] == [instructions.raster_line(line) for line in lines]
        assert backend.written[9] == b"\x1a"

    def test_returns_reply_after_print(self, make_backend, make_status):
        backend = make_backend([make_status(), make_status(status_type=0x06)])
        status = BrotherQLPrinter(backend).print([bytes(90)])
        assert status.status_type == RespStatusTypes.PHASE_CHANGE

    def test_no_media(self, make_backend, make_status):
        backend = make_backend([make_status(media_type=0x00, width=0)])
        printer = BrotherQLPrinter(backend)
        with pytest.raises(BrotherQLNoMediaLoaded):
            printer.print([bytes(90)])

        assert backend.written == [instructions.status_request()]
        assert printer.state == PrinterState.ERRORED

    def test_unknown_media(self, make_backend, make_status):
        backend = make_backend([make_status(width=13)])
        printer = BrotherQLPrinter(backend)
        with pytest.raises(BrotherQLUnknownMedia):
            printer.print([bytes(90)])

        assert backend.written == [instructions.status_request()]
        assert printer.state == PrinterState.ERRORED

    def test_wrong_line_width_sends_nothing(self, make_backend, make_status):
        backend = make_backend([make_status()])
        with pytest.raises(BrotherQLRasterError):
            BrotherQLPrinter(backend).print([bytes(90), bytes(89)])
        assert backend.written == []

    def test_new_job_after_error(self, make_backend, make_status):
        backend = make_backend([make_status(media_type=0x00), make_status(), make_status()])
        printer = BrotherQLPrinter(backend)
        with pytest.raises(BrotherQLNoMediaLoaded):
            printer.print([])
        printer.print([])
        assert printer.state == PrinterState.TRIGGERED


class TestPrintBlocking:
    """Tests for waiting for a print to complete."""

    def test_waits_for_completion(self, make_backend, make_status):
        backend = make_backend(
            [
                make_status(),
                make_status(status_type=0x06),
                make_status(status_type=0x02, error_info_2=0x10),
                BrotherQLTransportError("Read timed out"),
                make_status()[:16],
                make_status(status_type=0x01),
            ]
        )
        printer = BrotherQLPrinter(backend)
        status = printer.print_blocking([bytes(90)] * 2, poll_interval=0)

        assert status.status_type == RespStatusTypes.PRINTING_COMPLETED
        assert printer.state == PrinterState.DONE
        assert backend.replies == []

    def test_timeout(self, make_backend, make_status):
        backend = make_backend([make_status(), make_status()])
        printer = BrotherQLPrinter(backend)
        with pytest.raises(BrotherQLTimeout):
            printer.print_blocking([], timeout=0.01, poll_interval=0.001)
        assert printer.state == PrinterState.ERRORED

    def test_cancel(self, make_backend, make_status):
        backend = make_backend([make_status(), make_status()])
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(BrotherQLCancelled):
            BrotherQLPrinter(backend).print_blocking([], cancel=cancel, poll_interval=0)
        assert backend.written[-1] == b"\x1a"

    def test_print_errors_are_raised(self, make_backend, make_status):
        backend = make_backend([make_status(media_type=0x00)])
        with pytest.raises(BrotherQLNoMediaLoaded):
            BrotherQLPrinter(backend).print_blocking([], poll_interval=0)
