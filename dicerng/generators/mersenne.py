from __future__ import annotations
from typing import Optional

import numpy as np

from dicerng.config import Config, DEFAULT_CONFIG
from dicerng.generators.base import DiceGenerator, key_words
from dicerng.mapper import draw_die
from dicerng.types import DicePair, Variant


class MersenneGenerator(DiceGenerator):
    """
    MT19937 de numpy (RandomState legado): un entero inicializa con init_genrand,
    un arreglo de palabras con init_by_array.
    """

    variant = Variant.MERSENNE

    def __init__(self, cfg: Config = DEFAULT_CONFIG) -> None:
        super().__init__(cfg)
        self._mt: Optional[np.random.RandomState] = None
        self.seed_value: Optional[int] = None

    @property
    def needs_seed(self) -> bool:
        return self._mt is None

    def seed(self, n: int) -> None:
        self._mt = np.random.RandomState(n & self.cfg.WORD_MASK)
        self.seed_value = n

    def seed_extended(self, value: int) -> None:
        if value <= self.cfg.WORD_MASK:
            self.seed(value)
            return
        key = np.array(key_words(value, self.cfg.MT_KEY_WORDS), dtype=np.uint32)
        self._mt = np.random.RandomState(key)
        self.seed_value = value

    def next_word(self) -> int:
        return int(self._mt.randint(0, 1 << 32, dtype=np.uint32))

    def roll(self) -> DicePair:
        return draw_die(self.next_word, self.cfg), draw_die(self.next_word, self.cfg)

    def report_seed(self) -> Optional[str]:
        return f"The current seed is {self.seed_value}."
