"""Tests for decoding status replies."""

import pytest

from brother_ql_thermal.control.constants import RespMediaTypes, RespStatusTypes
from brother_ql_thermal.control.errors import check_for_errors
from brother_ql_thermal.control.response import MediaState, StatusReply
from brother_ql_thermal.exceptions import BrotherQLMalformedReply, BrotherQLUnknownMedia
from brother_ql_thermal.labels import lookup
from brother_ql_thermal.models import Models


class TestStatusReply:
    """Tests for StatusReply.from_bytes."""

    def test_ql700_with_continuous_tape(self, make_status):
        """A QL-700 answering a status request with 29mm continuous tape loaded."""
        status = StatusReply.from_bytes(make_status())

        assert status.model is Models.QL700
        assert status.model.identifier == "QL-700"
        assert status.status_type == RespStatusTypes.REPLY_TO_STATUS_REQUEST
        assert status.errors == ()
        assert status.media == MediaState(RespMediaTypes.CONTINUOUS_LENGTH_TAPE, 29, 0)

        label = status.media.to_geometry()
        assert label == lookup(29)
        assert label.feed_margin == 35
        assert label.right_margin == 6

    def test_decoding_is_pure(self, make_status):
        data = make_status(error_info_1=0x04, status_type=0x02)
        assert StatusReply.from_bytes(data) == StatusReply.from_bytes(data)

    def test_reply_is_immutable(self, make_status):
        status = StatusReply.from_bytes(make_status(error_info_2=0x10))

        assert isinstance(status.errors, tuple)
        assert hash(status) == hash(StatusReply.from_bytes(make_status(error_info_2=0x10)))
        with pytest.raises(AttributeError):
            status.errors.append("System error")

    def test_accepts_bytearray(self, make_status):
        assert StatusReply.from_bytes(bytearray(make_status())).model is Models.QL700

    @pytest.mark.parametrize("length", [0, 31, 33])
    def test_wrong_length(self, make_status, length):
        data = (make_status() * 2)[:length]
        with pytest.raises(BrotherQLMalformedReply):
            StatusReply.from_bytes(data)

    def test_wrong_marker(self, make_status):
        data = b"\x81" + make_status()[1:]
        with pytest.raises(BrotherQLMalformedReply):
            StatusReply.from_bytes(data)

    def test_unknown_model_is_no_error(self, make_status):
        status = StatusReply.from_bytes(make_status(model=0x99))
        assert status.model is Models.UNKNOWN
        assert status.model.identifier == "Unknown"

    @pytest.mark.parametrize(
        "code,model",
        [
            (0x4F, "QL-500/550"),
            (0x31, "QL-560"),
            (0x32, "QL-570"),
            (0x33, "QL-580N"),
            (0x51, "QL-650TD"),
            (0x35, "QL-700"),
            (0x50, "QL-1050"),
            (0x34, "QL-1060N"),
        ],
    )
    def test_models(self, make_status, code, model):
        assert StatusReply.from_bytes(make_status(model=code)).model.identifier == model

    @pytest.mark.parametrize(
        "code,media_type",
        [
            (0x0A, RespMediaTypes.CONTINUOUS_LENGTH_TAPE),
            (0x0B, RespMediaTypes.DIE_CUT_LABELS),
            (0x00, RespMediaTypes.NO_MEDIA),
            (0x4A, RespMediaTypes.NO_MEDIA),
            (0xFF, RespMediaTypes.NO_MEDIA),
        ],
    )
    def test_media_types(self, make_status, code, media_type):
        assert StatusReply.from_bytes(make_status(media_type=code)).media.media_type == media_type

    @pytest.mark.parametrize(
        "code,status_type",
        [
            (0x00, RespStatusTypes.REPLY_TO_STATUS_REQUEST),
            (0x01, RespStatusTypes.PRINTING_COMPLETED),
            (0x02, RespStatusTypes.ERROR_OCCURRED),
            (0x05, RespStatusTypes.NOTIFICATION),
            (0x06, RespStatusTypes.PHASE_CHANGE),
            (0x03, RespStatusTypes.NOTIFICATION),
            (0xFF, RespStatusTypes.NOTIFICATION),
        ],
    )
    def test_status_types(self, make_status, code, status_type):
        assert StatusReply.from_bytes(make_status(status_type=code)).status_type == status_type

    def test_die_cut_media(self, make_status):
        status = StatusReply.from_bytes(make_status(media_type=0x0B, width=29, length=90))
        assert not status.media.is_continuous
        assert status.media.to_geometry() == lookup(29, 90)

    def test_zero_length_means_continuous(self, make_status):
        """The length decides about continuous tape, not the media type byte."""
        status = StatusReply.from_bytes(make_status(media_type=0x0B, width=62, length=0))
        assert status.media.to_geometry() == lookup(62)

    def test_unknown_media(self, make_status):
        status = StatusReply.from_bytes(make_status(width=13))
        with pytest.raises(BrotherQLUnknownMedia):
            status.media.to_geometry()


class TestErrors:
    """Tests for the error information bytes."""

    def test_first_and_last_flag_of_first_byte(self, make_status):
        status = StatusReply.from_bytes(make_status(error_info_1=0x01 | 0x80))
        assert status.errors == ("No media when printing", "Fan doesn't work")

    def test_no_errors(self):
        assert check_for_errors(0x00, 0x00) == ()

    def test_all_flags_in_order(self):
        assert check_for_errors(0xFF, 0xFF) == (
            "No media when printing",
            "End of media",
            "Tape cutter jam",
            "Main unit in use",
            "Fan doesn't work",
            "Transmission error",
            "Cover open",
            "Cannot feed",
            "System error",
        )

    def test_unused_bits_are_ignored(self):
        assert check_for_errors(0x08 | 0x20 | 0x40, 0x01 | 0x02 | 0x08 | 0x20) == ()

    def test_second_byte_follows_first(self, make_status):
        status = StatusReply.from_bytes(make_status(error_info_1=0x04, error_info_2=0x10 | 0x80, status_type=0x02))
        assert status.errors == ("Tape cutter jam", "Cover open", "System error")
        assert status.status_type == RespStatusTypes.ERROR_OCCURRED


class TestModels:
    """Tests for the model lookups."""

    def test_from_product_id(self):
        assert Models.from_product_id(0x2042) is Models.QL700
        assert Models.from_product_id(0x2016) is Models.QL500_550
        assert Models.from_product_id(0x2049) is None

    def test_identifiers_exclude_unknown(self):
        identifiers = Models.identifiers()
        assert "QL-700" in identifiers
        assert "Unknown" not in identifiers
        assert len(identifiers) == 8
