class HuffmanError(Exception):
    """Base class for everything the codec raises on purpose."""


class EmptyInputError(HuffmanError):
    """Raised when a tree or a bitstream is requested for zero symbols."""


class SymbolRangeError(HuffmanError, ValueError):
    """A symbol is outside 0..65535 (or outside what the output can hold)."""


class FrequencyOverflowError(HuffmanError, ValueError):
    """A frequency does not fit the 4-byte header field."""


### FORMAT ERRORS ###
class FormatError(HuffmanError):
    """The compressed data could not be parsed."""


class CorruptHeaderError(FormatError):
    pass


class TruncatedStreamError(FormatError):
    pass


class CorruptStreamError(FormatError):
    pass
