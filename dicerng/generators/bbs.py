"""
Generador de Blum, Blum y Shub.

Cada bit sale de elevar al cuadrado el estado modulo n = p * q y tomar el bit
bajo. Un dado se arma con un trit (maquina de 5 estados) y un bit:
    dado = trit + 3 * bit + 1
"""
from __future__ import annotations
from typing import Callable, Dict, Optional, Tuple
import logging

from dicerng.config import Config, DEFAULT_CONFIG
from dicerng.errors import ConfigurationError, SeedingFailure
from dicerng.generators.base import DiceGenerator
from dicerng.types import DicePair, Variant

logger = logging.getLogger(__name__)

_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53)

# estado -> (siguiente con bit 0, siguiente con bit 1); ("trit", v) termina
_TRIT_MACHINE: Dict[int, Tuple[Tuple[str, int], Tuple[str, int]]] = {
    0: (("state", 1), ("state", 2)),
    1: (("trit", 0), ("state", 3)),
    2: (("state", 4), ("trit", 2)),
    3: (("state", 1), ("trit", 1)),
    4: (("trit", 1), ("state", 2)),
}


def is_probable_prime(n: int, rounds: int = 10) -> bool:
    """Miller-Rabin con las primeras `rounds` bases primas (determinista)."""
    if n < 2:
        return False
    bases = _WITNESSES[:max(1, rounds)]
    for p in bases:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in bases:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def is_good_prime(x: int, cfg: Config = DEFAULT_CONFIG) -> bool:
    """Primo de Blum: x = 3 (mod 4), x >= 19 y pasa el test probabilistico."""
    return (x & 3) == 3 and x >= cfg.BBS_MIN_FACTOR and is_probable_prime(x, cfg.BBS_PRIME_ROUNDS)


def next_good_prime(x: int, cfg: Config = DEFAULT_CONFIG) -> int:
    """Siguiente primo de Blum estrictamente mayor que x."""
    x += 1
    while not is_good_prime(x, cfg):
        x += 1
    return x


def blum_factors(p: int, q: int, cfg: Config = DEFAULT_CONFIG) -> Tuple[int, int]:
    """
    Ajusta (p, q) a dos primos de Blum distintos.
    Un factor invalido (o q repetido) avanza al siguiente primo valido y se avisa.
    """
    original_p, original_q = p, q
    if not is_good_prime(p, cfg):
        p = next_good_prime(p, cfg)
        logger.warning("%d is an invalid Blum factor, using %d instead.", original_p, p)
    if not is_good_prime(q, cfg) or p == q:
        q = next_good_prime(q, cfg)
        if p == q:
            q = next_good_prime(q, cfg)
        logger.warning("%d is an invalid Blum factor, using %d instead.", original_q, q)
    return p, q


def trit_from_bits(next_bit: Callable[[], int]) -> int:
    """Digito ternario uniforme a partir de bits uniformes."""
    state = 0
    while True:
        kind, value = _TRIT_MACHINE[state][next_bit() & 1]
        if kind == "trit":
            return value
        state = value


class BBSGenerator(DiceGenerator):
    variant = Variant.BBS

    def __init__(self, cfg: Config = DEFAULT_CONFIG) -> None:
        super().__init__(cfg)
        self.modulus: Optional[int] = None
        self.state = 0

    def set_modulus(self, modulus: int) -> None:
        if modulus < 1:
            raise ConfigurationError(f"Blum modulus must be positive, got {modulus}")
        self.modulus = modulus

    def set_factors(self, p: int, q: int) -> Tuple[int, int]:
        if p < 1 or q < 1:
            raise ConfigurationError(f"Blum factors must be positive, got {p} and {q}")
        p, q = blum_factors(p, q, self.cfg)
        self.modulus = p * q
        return p, q

    @property
    def degraded(self) -> bool:
        return self.state in (0, 1)

    def check_seedable(self) -> None:
        if self.modulus is None:
            raise ConfigurationError("Set the Blum, Blum and Shub modulus before seeding")

    def seed(self, n: int) -> None:
        self.seed_extended(n)

    def seed_extended(self, value: int) -> None:
        self.check_seedable()
        self.state = value
        self._check_initial_seed()

    def _check_initial_seed(self) -> None:
        cfg = self.cfg
        if self.state < 1:
            self._seed_failure()
        start = self.state
        for _ in range(cfg.BBS_SEED_ATTEMPTS):
            z = self.state
            for _ in range(cfg.BBS_WARMUP_SQUARINGS):
                z = pow(z, 2, self.modulus)
            cycle = z
            for _ in range(cfg.BBS_MIN_CYCLE):
                z = pow(z, 2, self.modulus)
                if z == cycle:
                    break
            else:
                if self.state != start:
                    logger.info("Blum, Blum and Shub seed %d has a short cycle, using %d instead.", start, self.state)
                return
            self.state += 1
        self._seed_failure()

    def _seed_failure(self) -> None:
        self.state = 0
        logger.error(
            "Invalid seed and/or modulus for the Blum, Blum and Shub generator. "
            "Please reset the seed and/or modulus before continuing."
        )
        raise SeedingFailure("no Blum, Blum and Shub seed without a short cycle was found")

    def next_bit(self) -> int:
        self.state = pow(self.state, 2, self.modulus)
        return self.state & 1

    def _die(self) -> int:
        return trit_from_bits(self.next_bit) + self.next_bit() * 3 + 1

    def roll(self) -> DicePair:
        if self.degraded or self.modulus is None:
            logger.error("Blum, Blum and Shub state is unusable; reset the seed and/or modulus.")
            raise SeedingFailure("Blum, Blum and Shub generator is not seeded")
        return self._die(), self._die()

    def report_seed(self) -> Optional[str]:
        return f"The current seed is {self.state}, and the modulus is {self.modulus}."

    def report_counter(self, count: int) -> Optional[str]:
        return f"Number of calls since last seed: {count}."
