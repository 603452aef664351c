"""
This module turns text (and an optional logo) into the raster lines
understood by the Brother QL-series label printers.

The text is laid out on a grayscale canvas which spans the length of the
label horizontally and the print head vertically. The canvas is then
scanned sideways: every canvas column becomes one raster line.

The central piece of code in this module is the class
:py:class:`TextRasterizer`.
"""

import io
import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from .constants import (
    DEFAULT_CONTINUOUS_LENGTH,
    INK_THRESHOLD,
    NARROW_TAPE_EXTRA_DOTS,
    NARROW_TAPE_SECOND_ROW_DOTS,
    NARROW_TAPE_WIDTH_MM,
    PRIMARY_FONT_SIZE,
    PRIMARY_Y_CORRECTION,
    RASTER_LINE_BYTES,
    RASTER_LINE_DATA_BITS,
    RASTER_LINE_LEADING_BITS,
    SECOND_ROW_TOP_MARGIN,
    SECONDARY_FONT_SIZE,
    SECONDARY_Y_CORRECTION,
    SINGLE_LINE_FONT_SIZE,
    SINGLE_LINE_X_CORRECTION,
)
from .exceptions import BrotherQLRasterError
from .labels import FormFactor, MediaGeometry

logger = logging.getLogger(__name__)

FontLoader = Callable[[int], ImageFont.FreeTypeFont]


class LayoutVariant(Enum):
    #: one line of text, centered
    SINGLE_LINE = "single"
    #: a primary line with a smaller secondary line below it
    TWO_LINE = "two"


@dataclass(frozen=True)
class FittedText:
    text: str
    font: ImageFont.FreeTypeFont
    font_size: int
    # rendered size in pixels
    width: int
    height: int


@dataclass(frozen=True)
class CanvasLayout:
    # extent along the feed direction, one raster line per pixel
    length: int
    # extent along the print head used by the text
    width: int
    # extra rows below the text reserved for the second row image
    second_row: int = 0

    @property
    def size(self) -> tuple[int, int]:
        return self.length, self.width + self.second_row


def text_width(font: ImageFont.FreeTypeFont, text: str) -> int:
    """Pixel width of the glyph run, from the left edge of the first glyph to the right edge of the last one."""
    if not text:
        return 0
    left, _, right, _ = font.getbbox(text)
    return right - left


def fit_text(font_loader: FontLoader, text: str, max_width: int, max_font_size: float) -> FittedText:
    """
    Scale the font size down from ``max_font_size`` until the text fits length-wise.

    The first size whose rendered width is strictly less than ``max_width`` is used.

    :raises BrotherQLRasterError: if the text doesn't even fit at the smallest font size.
    """
    font_size = math.ceil(max_font_size)
    while font_size > 0:
        font = font_loader(font_size)
        width = text_width(font, text)
        if width < max_width:
            ascent, descent = font.getmetrics()
            return FittedText(text, font, font_size, width, ascent + descent)
        font_size -= 1
    raise BrotherQLRasterError(f"Text {text!r} doesn't fit into {max_width} dots")


def draw_text(image: Image.Image, fitted: FittedText, offset: tuple[int, int]) -> None:
    # The glyph coverage is used as alpha for black ink, anything outside the canvas is clipped.
    # The offset is the top left corner of the line, glyphs keep their bearings relative to it.
    draw = ImageDraw.Draw(image)
    draw.text(offset, fitted.text, font=fitted.font, fill=0)


def image_to_raster_lines(image: Image.Image) -> list[bytes]:
    """
    Sidescan a canvas into raster lines.

    Every column of the canvas becomes one line of :py:data:`RASTER_LINE_BYTES` bytes. Pixels darker
    than half intensity are printed. Row ``r`` of the canvas lands on bit ``12 + r`` of the line,
    counted MSB-first, so the first byte and the upper nibble of the second byte stay blank.

    :raises BrotherQLRasterError: if the canvas has more rows than the print head has dots.
    """
    image = image.convert("L")
    length, rows = image.size
    if rows > RASTER_LINE_DATA_BITS:
        fmt = "Canvas too wide for the print head: {} rows, at most {}"
        raise BrotherQLRasterError(fmt.format(rows, RASTER_LINE_DATA_BITS))

    ink = image.point(lambda x: 255 if x < INK_THRESHOLD else 0, mode="1")
    ink = ink.transpose(Image.Transpose.TRANSPOSE)
    head = Image.new("1", (RASTER_LINE_BYTES * 8, length), 0)
    head.paste(ink, (RASTER_LINE_LEADING_BITS, 0))

    data = head.tobytes(encoder_name="raw")
    return [data[start : start + RASTER_LINE_BYTES] for start in range(0, len(data), RASTER_LINE_BYTES)]


class TextRasterizer:
    """
    Lays out one or two lines of text on a label and converts them into raster lines.

    :param MediaGeometry label: The label media to print on.
    :param font: Path of a TrueType/OpenType font file, or a callable returning the font for a given size.
    """

    def __init__(self, label: MediaGeometry, font: str | Path | FontLoader) -> None:
        self.label = label
        if callable(font):
            self.font_loader = font
        else:
            font_data = Path(font).read_bytes()
            self.font_loader = lambda size: ImageFont.truetype(io.BytesIO(font_data), size)
        self.second_row_image: str | Path | Image.Image | None = None

    def set_second_row_image(self, image: str | Path | Image.Image | None) -> None:
        """
        Set an image (eg. a logo) to be printed below the text. Only the 12mm continuous
        tape has room for it.
        """
        self.second_row_image = image

    def canvas_layout(self, length: int | None = None) -> CanvasLayout:
        width = self.label.dots_printable[0] + self.label.right_margin
        if self.label.form_factor == FormFactor.DIE_CUT:
            if length is not None:
                logger.warning("Ignoring length %d for die-cut label %s", length, self.label.identifier)
            return CanvasLayout(self.label.dots_printable[1], width)

        second_row = 0
        if self.label.tape_size[0] == NARROW_TAPE_WIDTH_MM:
            # 12mm labels seem to need the extra rows, and there is a second usable label below the primary
            width += NARROW_TAPE_EXTRA_DOTS
            if self.second_row_image is not None:
                second_row = NARROW_TAPE_SECOND_ROW_DOTS
        return CanvasLayout(length or DEFAULT_CONTINUOUS_LENGTH, width, second_row)

    @staticmethod
    def resolve_layout(secondary_text: str | None, layout: LayoutVariant | None) -> LayoutVariant:
        if layout is None:
            return LayoutVariant.SINGLE_LINE if secondary_text is None else LayoutVariant.TWO_LINE
        if (layout == LayoutVariant.TWO_LINE) != (secondary_text is not None):
            raise ValueError(f"The {layout.value} line layout doesn't match the given secondary text {secondary_text!r}")
        return layout

    def render(
        self,
        text: str,
        secondary_text: str | None = None,
        font_scale: float = 1.0,
        layout: LayoutVariant | None = None,
        length: int | None = None,
    ) -> Image.Image:
        """
        Render the label into a grayscale canvas.

        :param str text: The primary text.
        :param str secondary_text: Smaller text printed below the primary text.
        :param float font_scale: Factor applied to the maximum font sizes.
        :param LayoutVariant layout: Defaults to the variant matching the presence of ``secondary_text``.
        :param int length: Length of the canvas in dots for continuous tape.
        """
        layout = self.resolve_layout(secondary_text, layout)
        canvas = self.canvas_layout(length)
        image = Image.new("L", canvas.size, 255)
        logger.debug("Canvas size: %dx%d", *canvas.size)

        if layout == LayoutVariant.TWO_LINE:
            primary = fit_text(self.font_loader, text, canvas.length, PRIMARY_FONT_SIZE * font_scale)
            secondary = fit_text(self.font_loader, secondary_text, canvas.length, SECONDARY_FONT_SIZE * font_scale)
            primary_offset = (
                canvas.length // 2 - primary.width // 2,
                canvas.width // 2 - primary.height // 2 - PRIMARY_Y_CORRECTION,
            )
            secondary_offset = (
                canvas.length // 2 - secondary.width // 2,
                canvas.width - secondary.height // 2 - SECONDARY_Y_CORRECTION,
            )
            draw_text(image, primary, primary_offset)
            draw_text(image, secondary, secondary_offset)
            logger.debug("Font sizes: primary %d, secondary %d", primary.font_size, secondary.font_size)
        else:
            primary = fit_text(self.font_loader, text, canvas.length, SINGLE_LINE_FONT_SIZE * font_scale)
            offset = (
                canvas.length // 2 - primary.width // 2 - SINGLE_LINE_X_CORRECTION,
                canvas.width // 2 - primary.height // 2,
            )
            draw_text(image, primary, offset)
            logger.debug("Font size: %d", primary.font_size)

        if self.second_row_image is not None:
            self._draw_second_row_image(image, canvas)
        return image

    def _draw_second_row_image(self, image: Image.Image, canvas: CanvasLayout) -> None:
        if not canvas.second_row:
            logger.warning("Label %s has no room for a second row image, skipping it.", self.label.identifier)
            return

        overlay = self.second_row_image
        if not isinstance(overlay, Image.Image):
            overlay = Image.open(overlay)
        if overlay.mode.endswith("A"):
            # place in front of white background and get rid of transparency
            bg = Image.new("RGB", overlay.size, (255, 255, 255))
            bg.paste(overlay, overlay.split()[-1])
            overlay = bg
        overlay = overlay.convert("L")

        ratio = overlay.width / overlay.height
        new_width = canvas.length
        new_height = int(new_width / ratio)
        if new_height > canvas.second_row - SECOND_ROW_TOP_MARGIN:
            new_height = canvas.second_row - SECOND_ROW_TOP_MARGIN
            new_width = int(new_height * ratio)
        resized = overlay.resize((max(new_width, 1), max(new_height, 1)), Image.Resampling.BILINEAR)
        image.paste(resized, ((canvas.length - resized.width) // 2, canvas.width))

    def rasterize(
        self,
        text: str,
        secondary_text: str | None = None,
        font_scale: float = 1.0,
        layout: LayoutVariant | None = None,
        length: int | None = None,
    ) -> list[bytes]:
        """Render the label and sidescan it into raster lines, in feed order. See :py:meth:`render`."""
        return image_to_raster_lines(self.render(text, secondary_text, font_scale, layout, length))


def rasterize(
    label: MediaGeometry,
    font: str | Path | FontLoader,
    text: str,
    secondary_text: str | None = None,
    font_scale: float = 1.0,
    layout: LayoutVariant | None = None,
    second_row_image: str | Path | Image.Image | None = None,
) -> list[bytes]:
    rasterizer = TextRasterizer(label, font)
    rasterizer.set_second_row_image(second_row_image)
    return rasterizer.rasterize(text, secondary_text, font_scale, layout)
