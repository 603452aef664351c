from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Model:
    """
    This class represents a printer model as it identifies itself, both
    in its USB device descriptor and in the status replies it sends.
    """

    # A string identifier given to each model. Eg. 'QL-700'.
    identifier: str
    # Value of the 'device dependent' byte 4 of a status reply
    status_code: int | None = None
    # USB product ids of the model (vendor is always Brother)
    product_ids: tuple[int, ...] = ()


class Models(Enum):
    QL500_550 = Model("QL-500/550", 0x4F, (0x2015, 0x2016))
    QL560 = Model("QL-560", 0x31, (0x2027,))
    QL570 = Model("QL-570", 0x32, (0x2028,))
    QL580N = Model("QL-580N", 0x33, (0x2029,))
    QL650TD = Model("QL-650TD", 0x51, (0x201B,))
    QL700 = Model("QL-700", 0x35, (0x2042,))
    QL1050 = Model("QL-1050", 0x50, (0x2020,))
    QL1060N = Model("QL-1060N", 0x34, (0x202A,))
    UNKNOWN = Model("Unknown")

    @property
    def identifier(self) -> str:
        return self.value.identifier

    @staticmethod
    def from_status_code(code: int) -> "Models":
        """Unknown codes are no protocol error, they map to :py:attr:`Models.UNKNOWN`."""
        for model in Models:
            if model.value.status_code == code:
                return model
        return Models.UNKNOWN

    @staticmethod
    def from_product_id(product_id: int) -> "Models | None":
        for model in Models:
            if product_id in model.value.product_ids:
                return model
        return None

    @staticmethod
    def identifiers() -> list[str]:
        return [model.identifier for model in Models if model is not Models.UNKNOWN]
