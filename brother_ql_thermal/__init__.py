"""
Driver for Brother QL-series thermal label printers connected via USB.
"""

from .backends import BaseBrotherQLBackend, BrotherQLBackendPyUSB
from .control.constants import RespMediaTypes, RespStatusTypes
from .control.response import MediaState, StatusReply
from .exceptions import BrotherQLError
from .labels import MediaGeometry, lookup
from .models import Models
from .printer import BrotherQLPrinter
from .raster import LayoutVariant, TextRasterizer, rasterize
