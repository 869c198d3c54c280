from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    # --- Dados / mapeo justo ---
    FACES: int = 6
    WORD_BITS: int = 32
    WORD_MASK: int = 0xFFFFFFFF
    # T: mayor múltiplo de 6 que no supera 2^32; Q = T / 6
    FAIR_LIMIT: int = 4294967292
    FAIR_QUOTIENT: int = 715827882

    # --- Blum, Blum y Shub ---
    BBS_MIN_FACTOR: int = 19
    BBS_PRIME_ROUNDS: int = 10
    BBS_SEED_ATTEMPTS: int = 32
    BBS_WARMUP_SQUARINGS: int = 8
    BBS_MIN_CYCLE: int = 16

    # --- ISAAC ---
    ISAAC_SIZE_LOG: int = 8
    ISAAC_SIZE: int = 256

    # --- Mersenne Twister (MT19937: 624 palabras de estado) ---
    MT_KEY_WORDS: int = 624

    # --- Semilla del sistema ---
    ENTROPY_BYTES: int = 64

    # --- random.org ---
    RANDOM_ORG_URL: str = "https://www.random.org/integers/"
    RANDOM_ORG_BATCH: int = 512
    RANDOM_ORG_TIMEOUT: float = 10.0


DEFAULT_CONFIG = Config()
