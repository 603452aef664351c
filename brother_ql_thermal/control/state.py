from enum import Enum, auto


class PrinterState(Enum):
    """The steps a print job goes through, in order. ``ERRORED`` ends a job that raised."""

    IDLE = auto()
    STATUS_QUERIED = auto()
    MODE_SET = auto()
    MEDIA_DESCRIBED = auto()
    SETTINGS_APPLIED = auto()
    MARGINS_SET = auto()
    LINES_SENT = auto()
    TRIGGERED = auto()
    AWAITING_COMPLETION = auto()
    DONE = auto()
    ERRORED = auto()
