import logging

from ..backends import BrotherQLBackendPyUSB
from ..labels import FormFactor, MediaGeometry
from ..models import Models

logger = logging.getLogger(__name__)


def textual_label_description(labels_to_include: list[MediaGeometry]) -> str:
    output = "Supported label sizes:\n"
    fmt = " {label_size:9s} {dots_printable:14s} {label_descr:26s}\n"
    output += fmt.format(label_size="Name", dots_printable="Printable px", label_descr="Description")
    for label in labels_to_include:
        if label.form_factor == FormFactor.DIE_CUT:
            dots_printable = "{0:4d} x {1:4d}".format(*label.dots_printable)
            label_descr = "({0:d} x {1:d} mm^2)".format(*label.tape_size)
        else:
            dots_printable = "{0:4d}".format(label.dots_printable[0])
            label_descr = "({0:d} mm endless)".format(label.tape_size[0])
        output += fmt.format(label_size=label.identifier, dots_printable=dots_printable, label_descr=label_descr)
    return output


def log_discovered_devices(available_devices: list[str], level=logging.INFO) -> None:
    for identifier in available_devices:
        _, product, _ = BrotherQLBackendPyUSB.extract_vendor_product_serial_from_device_identifier(identifier)
        model = Models.from_product_id(product)
        result = {"model": model.identifier if model else "unknown", "identifier": identifier}
        logger.log(level, "  Found a label printer: {identifier}  (model: {model})".format(**result))
