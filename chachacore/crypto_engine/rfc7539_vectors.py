"""
Published ChaCha20 test vectors from RFC 7539.
"""

# ── 2.1.1  quarter round ─────────────────────────────────────────
QR_INPUT  = (0x11111111, 0x01020304, 0x9B8D6F43, 0x01234567)
QR_OUTPUT = (0xEA2A92F4, 0xCB1CF8CE, 0x4581472E, 0x5881C4BB)

# ── 2.2.1  quarter round on a full state, QUARTERROUND(2, 7, 8, 13) ─
QR_STATE_INPUT = (
    0x879531E0, 0xC5ECF37D, 0x516461B1, 0xC9A62F8A,
    0x44C20EF3, 0x3390AF7F, 0xD9FC690B, 0x2A5F714C,
    0x53372767, 0xB00A5631, 0x974C541A, 0x359E9963,
    0x5C971061, 0x3D631689, 0x2098D9D6, 0x91DBD320,
)
QR_STATE_OUTPUT = (
    0x879531E0, 0xC5ECF37D, 0xBDB886DC, 0xC9A62F8A,
    0x44C20EF3, 0x3390AF7F, 0xD9FC690B, 0xCFACAFD2,
    0xE46BEA80, 0xB00A5631, 0x974C541A, 0x359E9963,
    0x5C971061, 0xCCC07C79, 0x2098D9D6, 0x91DBD320,
)

# ── 2.3.2  block function ────────────────────────────────────────
BLOCK_KEY     = bytes(range(32))
BLOCK_NONCE   = bytes.fromhex("000000090000004a00000000")
BLOCK_COUNTER = 1
BLOCK_STATE = (
    0x61707865, 0x3320646E, 0x79622D32, 0x6B206574,
    0x03020100, 0x07060504, 0x0B0A0908, 0x0F0E0D0C,
    0x13121110, 0x17161514, 0x1B1A1918, 0x1F1E1D1C,
    0x00000001, 0x09000000, 0x4A000000, 0x00000000,
)
BLOCK_OUTPUT = bytes.fromhex(
    "10f1e7e4d13b5915500fdd1fa32071c4"
    "c7d1f4c733c068030422aa9ac3d46c4e"
    "d2826446079faa0914c2d705d98b02a2"
    "b5129cd1de164eb9cbd083e8a2503c4e"
)

# ── 2.4.2  encryption ────────────────────────────────────────────
ENCRYPT_KEY     = bytes(range(32))
ENCRYPT_NONCE   = bytes.fromhex("000000000000004a00000000")
ENCRYPT_COUNTER = 1
ENCRYPT_PLAINTEXT = (
    b"Ladies and Gentlemen of the class of '99: If I could offer you "
    b"only one tip for the future, sunscreen would be it."
)
ENCRYPT_CIPHERTEXT = bytes.fromhex(
    "6e2e359a2568f98041ba0728dd0d6981"
    "e97e7aec1d4360c20a27afccfd9fae0b"
    "f91b65c5524733ab8f593dabcd62b357"
    "1639d624e65152ab8f530c359f0861d8"
    "07ca0dbf500d6a6156a38e088a22b65e"
    "52bc514d16ccf806818ce91ab7793736"
    "5af90bbf74a35be6b40b8eedf2785e42"
    "874d"
)

# ── A.1  keystream, test vector #1 ───────────────────────────────
ZERO_KEY      = bytes(32)
ZERO_NONCE    = bytes(12)
ZERO_COUNTER  = 0
ZERO_KEYSTREAM = bytes.fromhex(
    "76b8e0ada0f13d90405d6ae55386bd28"
    "bdd219b8a08ded1aa836efcc8b770dc7"
    "da41597c5157488d7724e03fb8d84a37"
    "6a43b8f41518a11cc387b669b2ee6586"
)
