from .abstract import BaseBrotherQLBackend
from .pyusb import BrotherQLBackendPyUSB
