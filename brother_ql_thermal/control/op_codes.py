from collections.abc import Iterator
from dataclasses import dataclass

from ..utils.hex import hex_format


@dataclass(frozen=True)
class OpCode:
    signature: bytes
    name: str
    following_bytes: int
    description: str


OPCODES = [
    OpCode(b"\x00", "preamble", -1, "Preamble, 200x 0x00 to clear command buffer"),
    OpCode(b"\x67", "raster QL", -1, ""),
    OpCode(b"\x1A", "print", 0, "print final page"),
    OpCode(b"\x1b\x40", "init", 0, "initialization"),
    OpCode(b"\x1b\x69\x61", "mode setting", 1, ""),
    OpCode(b"\x1b\x69\x7A", "media/quality", 10, "print-media and print-quality"),
    OpCode(b"\x1b\x69\x4D", "various", 1, "Auto cut flag in bit 6"),
    OpCode(b"\x1b\x69\x4B", "expanded", 1, "Cut at end in bit 3, high resolution in bit 6"),
    OpCode(b"\x1b\x69\x64", "margins", 2, ""),
    OpCode(b"\x1b\x69\x53", "status request", 0, "A status information request sent to the printer"),
]


def match_opcode(data: bytes) -> OpCode:
    matching_opcodes = [opcode for opcode in OPCODES if data.startswith(opcode.signature)]
    if len(matching_opcodes) != 1:
        raise ValueError("unknown opcode starting with {}...".format(hex_format(data[0:4])))
    return matching_opcodes[0]


def chunker(data: bytes) -> Iterator[bytes]:
    """
    Breaks a data stream into bytes objects containing single instructions each.

    A run of preamble bytes is yielded as one instruction.

    :raises ValueError: if the stream contains an unknown opcode.
    """
    data = bytes(data)
    while data:
        opcode = match_opcode(data)
        num_bytes = len(opcode.signature)
        if opcode.following_bytes > 0:
            num_bytes += opcode.following_bytes
        elif opcode.name == "preamble":
            num_bytes = len(data) - len(data.lstrip(b"\x00"))
        elif opcode.name == "raster QL":
            num_bytes += data[2] + 2

        yield data[:num_bytes]
        data = data[num_bytes:]
