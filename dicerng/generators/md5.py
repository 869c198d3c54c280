from __future__ import annotations
from typing import Optional, Tuple
import hashlib
import struct

from dicerng.generators.base import DiceGenerator
from dicerng.mapper import die_from_word
from dicerng.types import DicePair, Variant


class MD5Generator(DiceGenerator):
    """
    Cadena de hashes: MD5 del contador de 32 bits (little-endian); las dos
    primeras palabras del digest son los dos dados. Cada mitad que cae fuera
    del rango justo se vuelve a hashear por separado (avanzando el contador);
    la otra mitad se conserva.
    """

    variant = Variant.MD5
    counter: int = 0

    def seed(self, n: int) -> None:
        self.counter = n & self.cfg.WORD_MASK

    def _words(self) -> Tuple[int, int]:
        digest = hashlib.md5(struct.pack("<I", self.counter)).digest()
        return struct.unpack("<II", digest[:8])

    def _advance(self) -> None:
        self.counter = (self.counter + 1) & self.cfg.WORD_MASK

    def roll(self) -> DicePair:
        limit = self.cfg.FAIR_LIMIT
        first, second = self._words()
        while first >= limit:
            self._advance()
            first = self._words()[0]
        while second >= limit:
            self._advance()
            second = self._words()[1]
        self._advance()
        return die_from_word(first, self.cfg), die_from_word(second, self.cfg)

    def report_seed(self) -> Optional[str]:
        return f"The current seed is {self.counter}."

    def report_counter(self, count: int) -> Optional[str]:
        return f"Number of calls since last seed: {count}."
