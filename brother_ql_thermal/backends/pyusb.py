"""
Backend to support Brother QL-series printers via PyUSB.
Works on Mac OS X and Linux.

Requires PyUSB: https://github.com/walac/pyusb/
Install via `pip install pyusb`
"""

import logging

import usb.core
import usb.util

from ..constants import EDITOR_LITE_PRODUCT_ID, TRANSPORT_TIMEOUT_MS, USB_PRINTER_INTERFACE_CLASS, USB_VENDOR_ID
from ..exceptions import BrotherQLDeviceNotFound, BrotherQLTransportError
from ..models import Models
from .abstract import BaseBrotherQLBackend

logger = logging.getLogger(__name__)


class BrotherQLBackendPyUSB(BaseBrotherQLBackend):
    """
    BrotherQL backend talking to the bulk endpoints of the printer interface using PyUSB
    """

    READ_TIMEOUT = TRANSPORT_TIMEOUT_MS  # ms
    WRITE_TIMEOUT = TRANSPORT_TIMEOUT_MS  # ms

    def __init__(self, device_specifier: str | usb.core.Device) -> None:
        """
        device_specifier: string or usb.core.Device: identifier of the \
            format usb://idVendor:idProduct[/iSerialNumber] or usb.core.Device instance.
        """
        if isinstance(device_specifier, usb.core.Device):
            self.dev = device_specifier
        else:
            self.dev = BrotherQLBackendPyUSB.find_device(device_specifier)

        cfg_intf = 0
        try:
            self.was_kernel_driver_active = bool(self.dev.is_kernel_driver_active(cfg_intf))
            if self.was_kernel_driver_active:
                self.dev.detach_kernel_driver(cfg_intf)
        except NotImplementedError:
            self.was_kernel_driver_active = False

        try:
            # set the active configuration. With no arguments, the first configuration will be the active one
            self.dev.set_configuration()

            cfg = self.dev.get_active_configuration()
            intf = usb.util.find_descriptor(cfg, bInterfaceClass=USB_PRINTER_INTERFACE_CLASS)
            assert intf is not None, "Brother QL printers should have a printer class interface"
            usb.util.claim_interface(self.dev, intf)
        except usb.core.USBError as e:
            if self.was_kernel_driver_active:
                self.dev.attach_kernel_driver(cfg_intf)
            raise BrotherQLTransportError(f"Could not claim the printer interface: {e}") from e

        ep_match_in = lambda e: usb.util.endpoint_direction(e.bEndpointAddress) == usb.util.ENDPOINT_IN
        ep_match_out = lambda e: usb.util.endpoint_direction(e.bEndpointAddress) == usb.util.ENDPOINT_OUT

        ep_in = usb.util.find_descriptor(intf, custom_match=ep_match_in)
        ep_out = usb.util.find_descriptor(intf, custom_match=ep_match_out)

        assert ep_in is not None, "Input endpoint not found"
        assert ep_out is not None, "Output endpoint not found"

        self.write_dev = ep_out
        self.read_dev = ep_in

    def _read(self, length: int) -> bytes:
        try:
            # pyusb Device.read() operations return array() type - convert it to bytes()
            return bytes(self.read_dev.read(length, self.READ_TIMEOUT))
        except usb.core.USBError as e:
            raise BrotherQLTransportError(f"Reading from the printer failed: {e}") from e

    def _write(self, data: bytes) -> None:
        try:
            self.write_dev.write(data, self.WRITE_TIMEOUT)
        except usb.core.USBError as e:
            raise BrotherQLTransportError(f"Writing to the printer failed: {e}") from e

    def _dispose(self) -> None:
        usb.util.dispose_resources(self.dev)
        if self.was_kernel_driver_active:
            self.dev.attach_kernel_driver(0)

    @staticmethod
    def find_device(device_identifier: str) -> usb.core.Device:
        vendor, product, serial = BrotherQLBackendPyUSB.extract_vendor_product_serial_from_device_identifier(device_identifier)
        for device in BrotherQLBackendPyUSB.list_available_devices_as_usb():
            if device.idVendor != vendor or device.idProduct != product:
                continue
            if serial and usb.util.get_string(device, device.iSerialNumber) != serial:
                continue
            return device
        raise BrotherQLDeviceNotFound(f"No printer found for {device_identifier}")

    @staticmethod
    def is_supported(device: usb.core.Device) -> bool:
        if device.idProduct == EDITOR_LITE_PRODUCT_ID:
            logger.warning("You must disable Editor Lite mode on your QL-700 before you can print with it")
        return Models.from_product_id(device.idProduct) is not None

    @staticmethod
    def list_available_devices_as_usb() -> list[usb.core.Device]:
        devices = usb.core.find(find_all=True, idVendor=USB_VENDOR_ID)
        return [d for d in devices if BrotherQLBackendPyUSB.is_supported(d)]

    @staticmethod
    def list_available_devices() -> list[str]:
        """
        List all available devices for the respective backend

        returns: a list of identifiers of the format usb://0x04f9:0x2042/iSerialNumber
        """

        def extract_identifier(dev: usb.core.Device) -> str:
            try:
                serial = usb.util.get_string(dev, dev.iSerialNumber)
                return "usb://0x{:04x}:0x{:04x}/{}".format(dev.idVendor, dev.idProduct, serial)
            except (usb.core.USBError, ValueError):
                return "usb://0x{:04x}:0x{:04x}".format(dev.idVendor, dev.idProduct)

        return [extract_identifier(printer) for printer in BrotherQLBackendPyUSB.list_available_devices_as_usb()]

    @staticmethod
    def extract_vendor_product_serial_from_device_identifier(device_identifier: str) -> tuple[int, int, str]:
        device_identifier = device_identifier.removeprefix("usb://")
        vendor_product, _, serial = device_identifier.partition("/")
        vendor, _, product = vendor_product.partition(":")
        vendor, product = int(vendor, 16), int(product, 16)
        return vendor, product, serial
