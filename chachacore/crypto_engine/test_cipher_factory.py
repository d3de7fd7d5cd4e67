import pytest

from . import rfc7539_vectors as rfc
from .chacha_crypto import ChaCha20Cipher
from .cipher_factory import CipherFactory
from .reference_crypto import ReferenceChaCha20Cipher


def test_default_cipher_listed_first():
    assert CipherFactory.list_ciphers() == ["CHACHA20", "CHACHA20-OPENSSL"]


def test_create_returns_registered_class():
    key, nonce = rfc.ENCRYPT_KEY, rfc.ENCRYPT_NONCE
    assert isinstance(CipherFactory.create("CHACHA20", key, nonce),
                      ChaCha20Cipher)
    assert isinstance(CipherFactory.create("CHACHA20-OPENSSL", key, nonce),
                      ReferenceChaCha20Cipher)


@pytest.mark.parametrize("name", CipherFactory.list_ciphers())
def test_every_backend_passes_rfc_vector(name):
    with CipherFactory.create(name, rfc.ENCRYPT_KEY, rfc.ENCRYPT_NONCE,
                              rfc.ENCRYPT_COUNTER) as cipher:
        assert cipher.encrypt(rfc.ENCRYPT_PLAINTEXT) == rfc.ENCRYPT_CIPHERTEXT


def test_unknown_cipher():
    assert not CipherFactory.is_available("SALSA20")
    with pytest.raises(ValueError):
        CipherFactory.create("SALSA20", bytes(32), bytes(12))
    with pytest.raises(ValueError):
        CipherFactory.get_info("SALSA20")


def test_info():
    info = CipherFactory.get_info("CHACHA20")
    assert info["backend"] == "pure-python"
    assert info["key_bits"] == 256
    assert info["nonce_bytes"] == 12
    assert [i["name"] for i in CipherFactory.get_all_info()] == \
        CipherFactory.list_ciphers()
