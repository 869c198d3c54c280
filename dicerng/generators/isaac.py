"""
ISAAC (Indirection, Shift, Accumulate, Add, and Count) de Bob Jenkins, 32 bits.
"""
from __future__ import annotations
from typing import List, Optional, Sequence

from dicerng.config import Config, DEFAULT_CONFIG
from dicerng.generators.base import DiceGenerator, key_words
from dicerng.mapper import draw_die
from dicerng.types import DicePair, Variant

MASK32 = 0xFFFFFFFF
GOLDEN_RATIO = 0x9E3779B9


def _mix(a: int, b: int, c: int, d: int, e: int, f: int, g: int, h: int) -> List[int]:
    a ^= (b << 11) & MASK32; d = (d + a) & MASK32; b = (b + c) & MASK32
    b ^= c >> 2;             e = (e + b) & MASK32; c = (c + d) & MASK32
    c ^= (d << 8) & MASK32;  f = (f + c) & MASK32; d = (d + e) & MASK32
    d ^= e >> 16;            g = (g + d) & MASK32; e = (e + f) & MASK32
    e ^= (f << 10) & MASK32; h = (h + e) & MASK32; f = (f + g) & MASK32
    f ^= g >> 4;             a = (a + f) & MASK32; g = (g + h) & MASK32
    g ^= (h << 8) & MASK32;  b = (b + g) & MASK32; h = (h + a) & MASK32
    h ^= a >> 9;             c = (c + h) & MASK32; a = (a + b) & MASK32
    return [a, b, c, d, e, f, g, h]


class Isaac:
    """Estado ISAAC: `rsl` es a la vez la clave de entrada y el bloque de salida."""

    def __init__(self, seed_words: Sequence[int], size_log: int = 8) -> None:
        self.size_log = size_log
        self.size = 1 << size_log
        if len(seed_words) != self.size:
            raise ValueError(f"ISAAC needs {self.size} seed words, got {len(seed_words)}")
        self.rsl = [w & MASK32 for w in seed_words]
        self.mem = [0] * self.size
        self.a = self.b = self.c = 0
        self.count = 0
        self._init()

    def _init(self) -> None:
        s = [GOLDEN_RATIO] * 8
        for _ in range(4):
            s = _mix(*s)
        # dos pasadas: primero la clave, despues la propia memoria
        for source in (self.rsl, self.mem):
            for i in range(0, self.size, 8):
                s = _mix(*[(s[j] + source[i + j]) & MASK32 for j in range(8)])
                self.mem[i:i + 8] = s
        self.generate()
        self.count = self.size

    def generate(self) -> None:
        mm, r, size = self.mem, self.rsl, self.size
        half = size // 2
        low_mask = size - 1
        shift = self.size_log + 2
        a = self.a
        self.c = (self.c + 1) & MASK32
        b = (self.b + self.c) & MASK32
        for i in range(size):
            step = i & 3
            if step == 0:
                a ^= (a << 13) & MASK32
            elif step == 1:
                a ^= a >> 6
            elif step == 2:
                a ^= (a << 2) & MASK32
            else:
                a ^= a >> 16
            x = mm[i]
            a = (a + mm[(i + half) & low_mask]) & MASK32
            y = (mm[(x >> 2) & low_mask] + a + b) & MASK32
            mm[i] = y
            b = (mm[(y >> shift) & low_mask] + x) & MASK32
            r[i] = b
        self.a, self.b = a, b

    def next_word(self) -> int:
        if self.count == 0:
            self.generate()
            self.count = self.size
        self.count -= 1
        return self.rsl[self.count]


class IsaacGenerator(DiceGenerator):
    variant = Variant.ISAAC

    def __init__(self, cfg: Config = DEFAULT_CONFIG) -> None:
        super().__init__(cfg)
        self._isaac: Optional[Isaac] = None
        self.seed_value: Optional[int] = None

    @property
    def needs_seed(self) -> bool:
        return self._isaac is None

    def seed(self, n: int) -> None:
        # semilla nativa replicada en toda la clave
        self._isaac = Isaac([n & MASK32] * self.cfg.ISAAC_SIZE, self.cfg.ISAAC_SIZE_LOG)
        self.seed_value = n

    def seed_extended(self, value: int) -> None:
        if value <= self.cfg.WORD_MASK:
            self.seed(value)
            return
        self._isaac = Isaac(key_words(value, self.cfg.ISAAC_SIZE), self.cfg.ISAAC_SIZE_LOG)
        self.seed_value = value

    def roll(self) -> DicePair:
        return draw_die(self._isaac.next_word, self.cfg), draw_die(self._isaac.next_word, self.cfg)

    def report_seed(self) -> Optional[str]:
        return f"The current seed is {self.seed_value}."

    def report_counter(self, count: int) -> Optional[str]:
        return f"Number of calls since last seed: {count}."
