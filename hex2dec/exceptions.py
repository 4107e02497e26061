class Hex2DecError(Exception):
    """
    Base class for the errors raised while converting hex tokens.
    """


class ParseOverflowError(Hex2DecError):
    """
    Custom exception thrown when a hex token does not fit in 128 bits.
    """

    def __init__(self, digits):
        self.digits = digits
        super().__init__(f"number too large to fit in 128 bits: {digits}")


class InputReadError(Hex2DecError):
    """
    Custom exception thrown when a line cannot be read from the input stream.
    """


class TransformError(Hex2DecError):
    """
    Custom exception thrown by the driver when a line fails to transform and
    the run is configured to stop on errors.
    """

    origin = "hex2dec_line"


class ConfigError(Hex2DecError):
    """
    Custom exception thrown when there is an unrecoverable configuration error.
    """
