"""
Cryptographically-secure random keys, nonces and counters.
"""

import os
import secrets

from ..config.settings import Settings


class SecureRandom:

    @staticmethod
    def generate_bytes(length: int) -> bytes:
        return os.urandom(length)

    @staticmethod
    def generate_key(length: int = Settings.KEY_SIZE) -> bytes:
        return os.urandom(length)

    @staticmethod
    def generate_nonce(length: int = Settings.NONCE_SIZE) -> bytes:
        return os.urandom(length)

    @staticmethod
    def generate_counter() -> int:
        return secrets.randbelow(Settings.COUNTER_MAX + 1)

    @staticmethod
    def generate_int(min_val: int, max_val: int) -> int:
        return secrets.randbelow(max_val - min_val + 1) + min_val
