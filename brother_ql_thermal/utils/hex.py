def hex_format(data: bytes) -> str:
    """Format bytes as space separated hex pairs, eg. '1B 69 53'."""
    return " ".join("{:02X}".format(byte) for byte in bytes(data))
