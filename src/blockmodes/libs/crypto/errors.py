class CipherError(Exception):
    """Generic block-cipher mode failure."""


class BlockLengthError(CipherError, ValueError):
    """Indicates that the input is not a whole number of blocks."""


class PaddingError(CipherError, ValueError):
    """Indicates that strict unpadding found malformed padding."""
