# USB transport
USB_VENDOR_ID = 0x04F9
USB_PRINTER_INTERFACE_CLASS = 7
# A QL-700 with the "Editor Lite" switch enabled enumerates as a mass storage device with this product id
EDITOR_LITE_PRODUCT_ID = 0x2049
TRANSPORT_TIMEOUT_MS = 500
STATUS_POLL_INTERVAL = 0.05  # seconds

# Status reply
STATUS_REPLY_LENGTH = 32
STATUS_REPLY_MARKER = 0x80
STATUS_OFFSET_MODEL = 4
STATUS_OFFSET_ERROR_INFORMATION_1 = 8
STATUS_OFFSET_ERROR_INFORMATION_2 = 9
STATUS_OFFSET_MEDIA_WIDTH = 10
STATUS_OFFSET_MEDIA_TYPE = 11
STATUS_OFFSET_MEDIA_LENGTH = 17
STATUS_OFFSET_STATUS_TYPE = 18

# Commands
CMD_INVALIDATE = b"\x00" * 200
CMD_INITIALIZE = b"\x1B\x40"  # ESC @
CMD_STATUS_REQUEST = b"\x1B\x69\x53"  # ESC i S
CMD_SWITCH_MODE = b"\x1B\x69\x61"  # ESC i a
CMD_MEDIA_AND_QUALITY = b"\x1B\x69\x7A"  # ESC i z
CMD_VARIOUS_MODE = b"\x1B\x69\x4D"  # ESC i M
CMD_EXPANDED_MODE = b"\x1B\x69\x4B"  # ESC i K
CMD_MARGINS = b"\x1B\x69\x64"  # ESC i d
CMD_RASTER_LINE = b"\x67\x00"
CMD_PRINT_FINAL = b"\x1A"  # 0x1A = ^Z = SUB; here: EOF = End of File

RASTER_MODE = 0x01
# media type, width, length, quality and recovery flags are all set
MEDIA_VALID_FLAGS = 0x80 | 0x40 | 0x08 | 0x04 | 0x02
MEDIA_TYPE_CONTINUOUS = 0x0A
MEDIA_TYPE_DIE_CUT = 0x0B
AUTOCUT_FLAG = 1 << 6
CUT_AT_END_FLAG = 1 << 3

# Raster
# Always 90 for the regular sized printers like the QL-700, independent of the loaded media
RASTER_LINE_BYTES = 90
# Byte 0 and the first nibble of byte 1 are blank
RASTER_LINE_LEADING_BITS = 12
RASTER_LINE_DATA_BITS = RASTER_LINE_BYTES * 8 - RASTER_LINE_LEADING_BITS
INK_THRESHOLD = 0x80

# Rasterizer layout
DEFAULT_CONTINUOUS_LENGTH = 750
NARROW_TAPE_WIDTH_MM = 12
NARROW_TAPE_EXTRA_DOTS = 25
NARROW_TAPE_SECOND_ROW_DOTS = 170
SECOND_ROW_TOP_MARGIN = 15
SINGLE_LINE_FONT_SIZE = 125.0
SINGLE_LINE_X_CORRECTION = 5
PRIMARY_FONT_SIZE = 90.0
PRIMARY_Y_CORRECTION = 25
SECONDARY_FONT_SIZE = 35.0
SECONDARY_Y_CORRECTION = 20
