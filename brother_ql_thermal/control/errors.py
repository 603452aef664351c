from enum import IntEnum


class RespErrorInformation1(IntEnum):
    NO_MEDIA_WHEN_PRINTING = 0
    END_OF_MEDIA = 1  # DieCut size only
    TAPE_CUTTER_JAM = 2
    MAIN_UNIT_IN_USE = 4  # QL-560/650TD/1050
    FAN_DOESNT_WORK = 7  # QL-1050/1060N

    @property
    def description(self) -> str:
        return RESP_ERROR_INFORMATION_1_DEF[self]

    def is_present(self, error_info: int) -> bool:
        return bool(error_info & (1 << self.value))


class RespErrorInformation2(IntEnum):
    TRANSMISSION_COMMUNICATION_ERROR = 2
    COVER_OPENED_WHILE_PRINTING = 4  # Except QL-500
    MEDIA_CANNOT_BE_FED = 6  # Also when the media end is detected
    SYSTEM_ERROR = 7

    @property
    def description(self) -> str:
        return RESP_ERROR_INFORMATION_2_DEF[self]

    def is_present(self, error_info: int) -> bool:
        return bool(error_info & (1 << self.value))


RESP_ERROR_INFORMATION_1_DEF = {
    RespErrorInformation1.NO_MEDIA_WHEN_PRINTING: "No media when printing",
    RespErrorInformation1.END_OF_MEDIA: "End of media",
    RespErrorInformation1.TAPE_CUTTER_JAM: "Tape cutter jam",
    RespErrorInformation1.MAIN_UNIT_IN_USE: "Main unit in use",
    RespErrorInformation1.FAN_DOESNT_WORK: "Fan doesn't work",
}

RESP_ERROR_INFORMATION_2_DEF = {
    RespErrorInformation2.TRANSMISSION_COMMUNICATION_ERROR: "Transmission error",
    RespErrorInformation2.COVER_OPENED_WHILE_PRINTING: "Cover open",
    RespErrorInformation2.MEDIA_CANNOT_BE_FED: "Cannot feed",
    RespErrorInformation2.SYSTEM_ERROR: "System error",
}


def check_for_errors(error_info_1: int, error_info_2: int) -> tuple[str, ...]:
    """
    Collect the descriptions of all error flags set in the two error information bytes.

    The order is stable: all flags of the first byte in declaration order, then those of the second.
    """
    errors = tuple(error.description for error in RespErrorInformation1 if error.is_present(error_info_1))
    errors += tuple(error.description for error in RespErrorInformation2 if error.is_present(error_info_2))
    return errors
