class HuffmanError(ValueError):
    """Base class for every failure raised by the codec."""


class StructuralError(HuffmanError):
    """Bit sequence points at a tree child that does not exist."""


class TruncatedStreamError(HuffmanError, EOFError):
    """Bits ran out before the expected number of symbols was decoded."""


class UnknownSymbolError(HuffmanError):
    """Byte to encode has no leaf in the tree."""
