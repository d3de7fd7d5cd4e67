"""
Error types raised by the ChaCha20 engine.

All of them are immediate usage errors: the cipher does no I/O, so
nothing here is transient or worth retrying.
"""


class ChaChaError(Exception):
    """Base class for every ChaChaCore error."""


class InvalidKeyLengthError(ChaChaError, ValueError):
    """Key is not exactly 32 bytes."""


class InvalidNonceLengthError(ChaChaError, ValueError):
    """Nonce is not exactly 12 bytes."""


class OutOfRangeError(ChaChaError, ValueError):
    """A length, offset or counter falls outside its allowed range."""


class DisposedError(ChaChaError, RuntimeError):
    """The cipher state has been released and can no longer be used."""
