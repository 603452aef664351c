class BrotherQLError(Exception):
    pass


class BrotherQLTransportError(BrotherQLError):
    """Reading from or writing to the device failed or timed out."""


class BrotherQLProtocolError(BrotherQLError):
    pass


class BrotherQLMalformedReply(BrotherQLProtocolError):
    """The printer sent something that is not a 32 byte status reply."""


class BrotherQLUnknownMedia(BrotherQLProtocolError):
    """The loaded media doesn't match any entry of the label geometry table."""


class BrotherQLNoMediaLoaded(BrotherQLProtocolError):
    pass


class BrotherQLRasterError(BrotherQLError):
    pass


class BrotherQLDeviceNotFound(BrotherQLError):
    pass


class BrotherQLTimeout(BrotherQLError):
    pass


class BrotherQLCancelled(BrotherQLError):
    pass
