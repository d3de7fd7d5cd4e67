"""
ChaCha20 — pure-Python stream cipher (RFC 7539 layout).

Designed by Daniel J. Bernstein.  A 64-byte keystream block is derived
from a 16-word state; the block counter advances after every block and
the keystream is XORed against the input.

Key:     32 bytes (256 bits)
Nonce:   12 bytes (96 bits)
Counter: 32-bit unsigned, caller-chosen starting block

Counter overflow carries into the first nonce word instead of failing.
That extends one nonce's stream past 2^38 bytes; it is not RFC 7539
behaviour.  Going past 2^70 bytes per nonce is the caller's problem.
"""

import logging

from ..config.settings import Settings
from .chacha_core import CONSTANTS, chacha20_block
from .exceptions import (
    DisposedError, InvalidKeyLengthError, InvalidNonceLengthError,
    OutOfRangeError,
)
from .stream_base import StreamCipher
from .word_codec import add_one32, u8_to_u32_little

logger = logging.getLogger("ChaChaCore.ChaCha20")

COUNTER_WORD = 12
NONCE_WORD   = 13


class ChaCha20Cipher(StreamCipher):
    """
    ChaCha20 keystream generator with explicit state wiping.

    Usage:
        with ChaCha20Cipher(key, nonce, counter=1) as cipher:
            ciphertext = cipher.encrypt(plaintext)

    The state is zeroed by release(), on leaving the ``with`` block and,
    as a last resort, when the object is garbage-collected.
    """
    KEY_SIZE   = Settings.KEY_SIZE
    NONCE_SIZE = Settings.NONCE_SIZE

    def __init__(self, key: bytes, nonce: bytes, counter: int = 0):
        self._state: list[int] | None = [0] * Settings.STATE_WORDS
        self._released = False

        try:
            self._key_setup(key)
            self._iv_setup(nonce, counter)
        except BaseException:
            self.release()
            raise

        logger.debug(
            "ChaCha20 state ready (key=%d bits, counter=%d)",
            self.key_size_bits, counter,
        )

    # ── state setup ──────────────────────────────────────────────
    def _key_setup(self, key: bytes):
        if key is None:
            raise TypeError("ChaCha20 key must not be None")
        if len(key) != self.KEY_SIZE:
            raise InvalidKeyLengthError(
                f"ChaCha20 key must be 32 bytes, got {len(key)}"
            )

        state = self._state
        state[0:4] = CONSTANTS
        for i in range(8):
            state[4 + i] = u8_to_u32_little(key, 4 * i)

    def _iv_setup(self, nonce: bytes, counter: int):
        # The key is already in the state: wipe it before any error escapes.
        try:
            self._load_iv(nonce, counter)
        except BaseException:
            self.release()
            raise

    def _load_iv(self, nonce: bytes, counter: int):
        if nonce is None:
            raise TypeError("ChaCha20 nonce must not be None")
        if len(nonce) != self.NONCE_SIZE:
            raise InvalidNonceLengthError(
                f"ChaCha20 nonce must be 12 bytes, got {len(nonce)}"
            )
        if (isinstance(counter, bool) or not isinstance(counter, int)
                or not 0 <= counter <= Settings.COUNTER_MAX):
            raise OutOfRangeError(
                f"ChaCha20 counter must be a 32-bit unsigned int, "
                f"got {counter!r}"
            )

        state = self._state
        state[COUNTER_WORD] = counter
        for i in range(3):
            state[NONCE_WORD + i] = u8_to_u32_little(nonce, 4 * i)

    # ── accessors ────────────────────────────────────────────────
    @property
    def state(self) -> tuple[int, ...]:
        """Read-only snapshot of the 16 state words (zeros once released)."""
        if self._state is None:
            return (0,) * Settings.STATE_WORDS
        return tuple(self._state)

    @property
    def counter(self) -> int:
        return self.state[COUNTER_WORD]

    @property
    def is_released(self) -> bool:
        return self._released

    @property
    def cipher_name(self) -> str:
        return "CHACHA20"

    @property
    def backend(self) -> str:
        return "pure-python"

    # ── streaming ────────────────────────────────────────────────
    def process(self, output, data, num_bytes: int | None = None):
        """
        XOR *num_bytes* of *data* with keystream into *output*.

        Every block produced, including a short final one, advances the
        counter.  To continue a stream seamlessly over several calls,
        pass multiples of 64 bytes to all but the last call.
        """
        if self._released:
            raise DisposedError(
                "The ChaCha state has been cleared (release() was called)"
            )
        if num_bytes is None:
            num_bytes = len(data)
        if (isinstance(num_bytes, bool) or not isinstance(num_bytes, int)
                or not 0 <= num_bytes <= len(data)):
            raise OutOfRangeError(
                f"num_bytes must be between 0 and {len(data)}, "
                f"got {num_bytes!r}"
            )
        if len(output) < num_bytes:
            raise OutOfRangeError(
                f"Output buffer holds {len(output)} bytes, "
                f"{num_bytes} needed"
            )
        out = memoryview(output)
        if out.readonly:
            raise TypeError("Output buffer must be writable")
        src = memoryview(data)

        offset    = 0
        remaining = num_bytes
        while remaining > 0:
            keystream = chacha20_block(self._state)
            self._advance_counter()

            n     = min(remaining, Settings.BLOCK_SIZE)
            chunk = int.from_bytes(src[offset:offset + n], "little")
            pad   = int.from_bytes(keystream[:n], "little")
            out[offset:offset + n] = (chunk ^ pad).to_bytes(n, "little")

            offset    += n
            remaining -= n

    encrypt_bytes = process

    def _advance_counter(self):
        state = self._state
        state[COUNTER_WORD] = add_one32(state[COUNTER_WORD])
        if state[COUNTER_WORD] == 0:
            state[NONCE_WORD] = add_one32(state[NONCE_WORD])
            logger.warning(
                "Block counter wrapped; carried into nonce word %d",
                NONCE_WORD,
            )

    # ── teardown ─────────────────────────────────────────────────
    def _wipe(self):
        state = getattr(self, "_state", None)
        if state is not None:
            for i in range(len(state)):
                state[i] = 0
        self._state    = None
        self._released = True

    def release(self):
        if not self._released:
            logger.debug("ChaCha20 state released")
        self._wipe()

    def __del__(self):
        self._wipe()

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} counter={self.counter} "
            f"released={self._released}>"
        )
