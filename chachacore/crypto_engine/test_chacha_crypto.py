import logging
import os

import pytest

from . import rfc7539_vectors as rfc
from .chacha_core import chacha20_block
from .chacha_crypto import ChaCha20Cipher
from .exceptions import (
    ChaChaError, DisposedError, InvalidKeyLengthError,
    InvalidNonceLengthError, OutOfRangeError,
)

KEY   = bytes(range(32))
NONCE = bytes.fromhex("000000090000004a00000000")


def _cipher(counter=1, key=KEY, nonce=NONCE):
    return ChaCha20Cipher(key, nonce, counter)


# ── construction ────────────────────────────────────────────────

def test_state_layout_after_setup():
    cipher = _cipher(counter=rfc.BLOCK_COUNTER,
                     key=rfc.BLOCK_KEY, nonce=rfc.BLOCK_NONCE)
    assert cipher.state == rfc.BLOCK_STATE
    assert cipher.counter == 1


def test_accepts_bytearray_and_memoryview_inputs():
    cipher = ChaCha20Cipher(bytearray(KEY), memoryview(NONCE), 1)
    assert cipher.state == rfc.BLOCK_STATE


@pytest.mark.parametrize("size", [0, 16, 31, 33])
def test_rejects_bad_key_length(size):
    with pytest.raises(InvalidKeyLengthError):
        ChaCha20Cipher(bytes(size), NONCE, 0)


@pytest.mark.parametrize("size", [0, 8, 11, 13, 16])
def test_rejects_bad_nonce_length(size):
    with pytest.raises(InvalidNonceLengthError):
        ChaCha20Cipher(KEY, bytes(size), 0)


@pytest.mark.parametrize("counter", [-1, 2 ** 32, 1.0, True])
def test_rejects_bad_counter(counter):
    with pytest.raises(OutOfRangeError):
        ChaCha20Cipher(KEY, NONCE, counter)


def test_rejects_missing_key_or_nonce():
    with pytest.raises(TypeError):
        ChaCha20Cipher(None, NONCE, 0)
    with pytest.raises(TypeError):
        ChaCha20Cipher(KEY, None, 0)


def test_errors_share_a_base_class():
    assert issubclass(InvalidKeyLengthError, ChaChaError)
    assert issubclass(InvalidNonceLengthError, ValueError)
    assert issubclass(OutOfRangeError, ValueError)
    assert issubclass(DisposedError, RuntimeError)


def test_failed_nonce_setup_wipes_key_material():
    cipher = _cipher()
    assert any(cipher.state[4:12])
    with pytest.raises(InvalidNonceLengthError):
        cipher._iv_setup(b"short", 0)
    assert cipher.is_released
    assert cipher.state == (0,) * 16


def test_non_bytes_nonce_wipes_key_material():
    cipher = _cipher()
    with pytest.raises(TypeError):
        cipher._iv_setup("x" * 12, 0)
    assert cipher.is_released
    assert cipher.state == (0,) * 16


class _RecordingCipher(ChaCha20Cipher):
    instances = []

    def __init__(self, *args):
        self.instances.append(self)
        super().__init__(*args)


@pytest.mark.parametrize("key, nonce, error", [
    (bytes(31), NONCE, InvalidKeyLengthError),
    ("k" * 32, NONCE, TypeError),
    (KEY, "x" * 12, TypeError),
    (KEY, bytes(13), InvalidNonceLengthError),
])
def test_failed_construction_leaves_cipher_released(key, nonce, error):
    _RecordingCipher.instances.clear()
    with pytest.raises(error):
        _RecordingCipher(key, nonce, 0)
    cipher = _RecordingCipher.instances[0]
    assert cipher.is_released
    assert cipher.state == (0,) * 16


# ── known answers ───────────────────────────────────────────────

def test_rfc_sunscreen_vector():
    cipher = ChaCha20Cipher(rfc.ENCRYPT_KEY, rfc.ENCRYPT_NONCE,
                            rfc.ENCRYPT_COUNTER)
    assert cipher.encrypt(rfc.ENCRYPT_PLAINTEXT) == rfc.ENCRYPT_CIPHERTEXT


def test_rfc_zero_keystream():
    cipher = ChaCha20Cipher(rfc.ZERO_KEY, rfc.ZERO_NONCE, rfc.ZERO_COUNTER)
    assert cipher.encrypt(bytes(64)) == rfc.ZERO_KEYSTREAM


def test_first_block_matches_block_function():
    cipher = _cipher()
    expected = chacha20_block(cipher.state)
    assert cipher.encrypt(bytes(64)) == expected


# ── stream behaviour ────────────────────────────────────────────

@pytest.mark.parametrize("size", [0, 1, 63, 64, 65, 200, 1000])
def test_decrypt_inverts_encrypt(size):
    plaintext = os.urandom(size)
    ciphertext = _cipher(counter=7).encrypt(plaintext)
    assert len(ciphertext) == size
    assert _cipher(counter=7).decrypt(ciphertext) == plaintext


def test_same_parameters_same_output():
    data = os.urandom(300)
    assert _cipher().encrypt(data) == _cipher().encrypt(data)


def test_different_counter_different_output():
    data = bytes(64)
    assert _cipher(counter=1).encrypt(data) != _cipher(counter=2).encrypt(data)


@pytest.mark.parametrize("size, blocks", [
    (0, 0), (64, 1), (128, 2), (640, 10), (1, 1), (130, 3),
])
def test_counter_advances_once_per_block(size, blocks):
    cipher = _cipher(counter=5)
    cipher.encrypt(bytes(size))
    assert cipher.counter == 5 + blocks


def test_counter_overflow_carries_into_nonce(caplog):
    nonce  = bytes.fromhex("04030201" "00000000" "00000000")
    cipher = ChaCha20Cipher(KEY, nonce, 0xFFFFFFFF)
    with caplog.at_level(logging.WARNING, logger="ChaChaCore.ChaCha20"):
        cipher.encrypt(bytes(64))
    assert cipher.state[12] == 0
    assert cipher.state[13] == 0x01020305
    assert "wrapped" in caplog.text


def test_counter_overflow_wraps_nonce_word_too():
    nonce  = b"\xff\xff\xff\xff" + bytes(8)
    cipher = ChaCha20Cipher(KEY, nonce, 0xFFFFFFFF)
    cipher.encrypt(bytes(1))
    assert cipher.state[12] == 0
    assert cipher.state[13] == 0


def test_keystream_continues_after_overflow():
    cipher = ChaCha20Cipher(KEY, NONCE, 0xFFFFFFFF)
    second_state = list(cipher.state)
    second_state[12] = 0
    second_state[13] += 1
    out = cipher.encrypt(bytes(128))
    assert out[64:] == chacha20_block(second_state)


def test_split_calls_continue_the_stream():
    data = os.urandom(70)
    whole = _cipher().encrypt(data)

    cipher = _cipher()
    split = cipher.encrypt(data[:64]) + cipher.encrypt(data[64:])
    assert split == whole


def test_process_into_caller_buffer():
    data = os.urandom(100)
    out  = bytearray(120)
    _cipher().process(out, data, 100)
    assert bytes(out[:100]) == _cipher().encrypt(data)
    assert out[100:] == bytearray(20)


def test_process_partial_input():
    data = os.urandom(100)
    out  = bytearray(100)
    _cipher().process(out, data, 10)
    assert bytes(out[:10]) == _cipher().encrypt(data[:10])
    assert out[10:] == bytearray(90)


def test_process_in_place():
    data = os.urandom(150)
    buf  = bytearray(data)
    _cipher().process(buf, buf)
    assert bytes(buf) == _cipher().encrypt(data)


def test_process_zero_bytes_is_noop():
    cipher = _cipher()
    out = bytearray(4)
    cipher.process(out, b"abcd", 0)
    assert out == bytearray(4)
    assert cipher.counter == 1


@pytest.mark.parametrize("num_bytes", [-1, 11, 1.5])
def test_process_rejects_bad_length(num_bytes):
    cipher = _cipher()
    out = bytearray(32)
    with pytest.raises(OutOfRangeError):
        cipher.process(out, bytes(10), num_bytes)
    assert out == bytearray(32)
    assert cipher.counter == 1


def test_process_rejects_small_output():
    cipher = _cipher()
    with pytest.raises(OutOfRangeError):
        cipher.process(bytearray(5), bytes(10), 10)
    assert cipher.counter == 1


def test_process_rejects_read_only_output():
    with pytest.raises(TypeError):
        _cipher().process(bytes(10), bytes(10), 10)


# ── release ─────────────────────────────────────────────────────

def test_release_wipes_and_blocks_use():
    cipher = _cipher()
    cipher.release()
    assert cipher.is_released
    assert cipher.state == (0,) * 16
    with pytest.raises(DisposedError):
        cipher.encrypt(b"data")
    with pytest.raises(DisposedError):
        cipher.process(bytearray(4), b"data", 4)


def test_release_is_idempotent():
    cipher = _cipher()
    cipher.release()
    cipher.release()
    cipher.close()
    assert cipher.state == (0,) * 16


def test_context_manager_releases_on_error():
    with pytest.raises(RuntimeError):
        with _cipher() as cipher:
            cipher.encrypt(b"data")
            raise RuntimeError("boom")
    assert cipher.is_released
    assert cipher.state == (0,) * 16


def test_disposed_check_precedes_range_check():
    cipher = _cipher()
    cipher.release()
    with pytest.raises(DisposedError):
        cipher.process(bytearray(1), b"", 5)


def test_state_is_a_snapshot():
    cipher = _cipher()
    snapshot = cipher.state
    cipher.encrypt(bytes(64))
    assert snapshot[12] == 1
    assert cipher.state[12] == 2


def test_repr_hides_key():
    text = repr(_cipher())
    assert "counter=1" in text
    assert KEY.hex() not in text


def test_info():
    info = _cipher().info()
    assert info["name"] == "CHACHA20"
    assert info["backend"] == "pure-python"
    assert info["key_bits"] == 256
    assert info["iv_bytes"] == 12
