"""
ChaChaCore — Cipher Verification Script

Run this to verify every registered ChaCha20 backend:
    python verify_vectors.py
"""

import logging
import os
import sys
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from chachacore.config.settings import Settings
from chachacore.crypto_engine import (
    CipherFactory, DisposedError, chacha20_block, quarter_round,
)
from chachacore.crypto_engine import rfc7539_vectors as rfc
from chachacore.utils import SecureRandom


def _setup_logging():
    root_logger = logging.getLogger()
    root_logger.setLevel(Settings.LOG_LEVEL)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(
        Settings.LOG_FORMAT, datefmt=Settings.LOG_DATEFMT,
    ))
    root_logger.addHandler(console_handler)


def _check(label: str, ok: bool) -> bool:
    mark = "✅" if ok else "❌"
    print(f"  {mark} {label}")
    return ok


def main():
    _setup_logging()
    logger = logging.getLogger("ChaChaCore.Verify")

    print("╔══════════════════════════════════════════════════╗")
    print("║      ChaChaCore — Cipher Verification Suite      ║")
    print("╚══════════════════════════════════════════════════╝")
    print()

    all_pass = True

    # ── Test 1: RFC 7539 primitives ──────────────────────────────
    print("━━━ Test 1: RFC 7539 Primitives ━━━━━━━━━━━━━━━━━━━")
    x = list(rfc.QR_INPUT) + [0] * 12
    quarter_round(x, 0, 1, 2, 3)
    all_pass &= _check("2.1.1 quarter round", tuple(x[:4]) == rfc.QR_OUTPUT)

    x = list(rfc.QR_STATE_INPUT)
    quarter_round(x, 2, 7, 8, 13)
    all_pass &= _check("2.2.1 quarter round on state",
                       tuple(x) == rfc.QR_STATE_OUTPUT)

    all_pass &= _check("2.3.2 block function",
                       chacha20_block(rfc.BLOCK_STATE) == rfc.BLOCK_OUTPUT)
    print()

    # ── Test 2: Known-answer encryption ──────────────────────────
    print("━━━ Test 2: Known-Answer Encryption ━━━━━━━━━━━━━━━")
    for name in CipherFactory.list_ciphers():
        with CipherFactory.create(name, rfc.ENCRYPT_KEY, rfc.ENCRYPT_NONCE,
                                  rfc.ENCRYPT_COUNTER) as cipher:
            ct = cipher.encrypt(rfc.ENCRYPT_PLAINTEXT)
        all_pass &= _check(f"{name:<20s} 2.4.2 sunscreen",
                           ct == rfc.ENCRYPT_CIPHERTEXT)

        with CipherFactory.create(name, rfc.ZERO_KEY, rfc.ZERO_NONCE,
                                  rfc.ZERO_COUNTER) as cipher:
            ks = cipher.encrypt(bytes(64))
        all_pass &= _check(f"{name:<20s} A.1 #1 keystream",
                           ks == rfc.ZERO_KEYSTREAM)
    print()

    # ── Test 3: Round trip + cross-check ─────────────────────────
    print("━━━ Test 3: Round Trip & Cross-Check ━━━━━━━━━━━━━━")
    key     = SecureRandom.generate_key()
    nonce   = SecureRandom.generate_nonce()
    counter = SecureRandom.generate_int(0, 1 << 20)
    test_messages = [
        b"Hello, World!",
        b"",                                     # empty
        b"\x00" * 100,                            # null bytes
        b"A" * 10_000,                            # 10 KB
        os.urandom(65_537),                       # odd size
    ]
    reference = {}
    for name in CipherFactory.list_ciphers():
        ok = True
        for i, msg in enumerate(test_messages):
            enc = CipherFactory.create(name, key, nonce, counter).encrypt(msg)
            dec = CipherFactory.create(name, key, nonce, counter).decrypt(enc)
            if dec != msg:
                ok = False
            if i in reference and reference[i] != enc:
                logger.error("%s disagrees on message %d", name, i)
                ok = False
            reference.setdefault(i, enc)
        all_pass &= _check(f"{name:<20s} round trip / agreement", ok)
    print()

    # ── Test 4: Release ──────────────────────────────────────────
    print("━━━ Test 4: Release ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")
    for name in CipherFactory.list_ciphers():
        cipher = CipherFactory.create(name, key, nonce)
        cipher.release()
        cipher.release()
        try:
            cipher.encrypt(b"after release")
            ok = False
        except DisposedError:
            ok = True
        all_pass &= _check(f"{name:<20s} use after release rejected", ok)
    print()

    # ── Test 5: Benchmark ────────────────────────────────────────
    size = Settings.BENCHMARK_BYTES
    print(f"━━━ Test 5: Performance Benchmark ({size // 1024} KB) ━━━━━━━━")
    data = os.urandom(size)
    for name in CipherFactory.list_ciphers():
        cipher = CipherFactory.create(name, key, nonce)
        t0 = time.perf_counter()
        cipher.encrypt(data)
        elapsed = time.perf_counter() - t0
        cipher.release()
        speed = (size / (1024 * 1024)) / elapsed if elapsed > 0 else 9999
        print(f"  {name:<20s}  {speed:>9.2f} MB/s  ({elapsed * 1000:>8.1f} ms)")

    print()
    print("━━━ Summary ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")
    print(f"  Backends tested: {len(CipherFactory.list_ciphers())}")
    if all_pass:
        print("  Result:          🎉 ALL CHECKS PASSED")
    else:
        print("  Result:          ⚠️  SOME CHECKS FAILED")
    print()
    return 0 if all_pass else 1


if __name__ == "__main__":
    sys.exit(main())
