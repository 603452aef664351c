from dataclasses import dataclass

from .form_factor import FormFactor


@dataclass(frozen=True)
class MediaGeometry:
    """
    Physical and printable dimensions of a label media.

    All dimensions are (width, length) pairs. Widths run along the print head, lengths along the
    feed direction. A length of 0 denotes continuous tape.
    """

    # Size of the tape in mm
    tape_size: tuple[int, int]
    # Total number of dots of the media
    dots: tuple[int, int]
    # Dots that can actually be reached by the print head
    dots_printable: tuple[int, int]
    # Unprintable dots on the right side of the print head
    right_margin: int
    # Extra feed inserted to allow clean cutting
    feed_margin: int

    @property
    def form_factor(self) -> FormFactor:
        return FormFactor.ENDLESS if self.tape_size[1] == 0 else FormFactor.DIE_CUT

    @property
    def identifier(self) -> str:
        if self.form_factor == FormFactor.ENDLESS:
            return str(self.tape_size[0])
        return "{}x{}".format(*self.tape_size)


def _continuous(width: int, dots: int, printable: int, right_margin: int) -> MediaGeometry:
    return MediaGeometry((width, 0), (dots, 0), (printable, 0), right_margin, feed_margin=35)


def _die_cut(tape_size: tuple[int, int], dots: tuple[int, int], printable: tuple[int, int], right_margin: int) -> MediaGeometry:
    return MediaGeometry(tape_size, dots, printable, right_margin, feed_margin=0)


CONTINUOUS_TAPES: dict[int, MediaGeometry] = {
    12: _continuous(12, 142, 106, 29),
    29: _continuous(29, 342, 306, 6),
    38: _continuous(38, 449, 413, 12),
    50: _continuous(50, 590, 554, 12),
    54: _continuous(54, 636, 590, 0),
    62: _continuous(62, 732, 696, 12),
    102: _continuous(102, 1200, 1164, 12),
}

DIE_CUT_LABELS: dict[tuple[int, int], MediaGeometry] = {
    (17, 54): _die_cut((17, 54), (201, 636), (165, 566), 0),
    (17, 87): _die_cut((17, 87), (201, 1026), (165, 956), 0),
    (23, 23): _die_cut((23, 23), (272, 272), (202, 202), 42),
    (29, 42): _die_cut((29, 42), (342, 495), (306, 425), 6),
    (29, 90): _die_cut((29, 90), (342, 1061), (306, 991), 6),
    # DK-11208 reports a width of 39 mm although the tape is 38 mm wide
    (39, 90): _die_cut((38, 90), (449, 1061), (413, 991), 12),
    (39, 48): _die_cut((39, 48), (461, 565), (425, 495), 6),
    (52, 29): _die_cut((52, 29), (614, 341), (578, 271), 0),
    (62, 29): _die_cut((62, 29), (732, 341), (696, 271), 12),
    (62, 100): _die_cut((62, 100), (732, 1179), (696, 1109), 12),
}


def lookup(width_mm: int, length_mm: int | None = None) -> MediaGeometry | None:
    """
    Resolve the media reported by the printer into its geometry.

    :param int width_mm: Width of the media in mm
    :param length_mm: Length of die-cut labels in mm, None for continuous tape
    :returns: The matching geometry, or None if the media is unknown.
    """
    if length_mm is None:
        return CONTINUOUS_TAPES.get(width_mm)
    return DIE_CUT_LABELS.get((width_mm, length_mm))


def all_geometries() -> list[MediaGeometry]:
    return list(CONTINUOUS_TAPES.values()) + list(DIE_CUT_LABELS.values())
