class Settings:
    """Centralised library configuration."""

    # ── application ──────────────────────────────────────────────
    APP_NAME    = "ChaChaCore"
    APP_VERSION = "1.0.0"

    # ── cipher geometry ──────────────────────────────────────────
    KEY_SIZE    = 32             # 256 bits
    NONCE_SIZE  = 12             # 96 bits
    BLOCK_SIZE  = 64             # bytes of keystream per block
    STATE_WORDS = 16
    ROUNDS      = 20
    COUNTER_MAX = 0xFFFFFFFF

    # ── crypto defaults ──────────────────────────────────────────
    DEFAULT_CIPHER = "CHACHA20"

    # ── verification ─────────────────────────────────────────────
    BENCHMARK_BYTES = 256 * 1024

    # ── logging ──────────────────────────────────────────────────
    LOG_LEVEL   = "DEBUG"
    LOG_FORMAT  = "[%(asctime)s] [%(levelname)-8s] %(name)s — %(message)s"
    LOG_DATEFMT = "%H:%M:%S"
