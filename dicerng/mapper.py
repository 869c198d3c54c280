"""
Mapeo de palabras de 32 bits a caras de dado sin sesgo de modulo.

Cada cara recibe exactamente Q = T / 6 valores crudos; los valores >= T se
descartan y se vuelve a sortear.
"""
from __future__ import annotations
from typing import Callable, Sequence

from dicerng.config import Config, DEFAULT_CONFIG


def die_from_word(value: int, cfg: Config = DEFAULT_CONFIG) -> int:
    """Convierte una palabra ya aceptada (< T) en una cara 1..6."""
    if not 0 <= value < cfg.FAIR_LIMIT:
        raise ValueError(f"raw value {value} outside the fair range [0, {cfg.FAIR_LIMIT})")
    return value // cfg.FAIR_QUOTIENT + 1


def draw_die(next_word: Callable[[], int], cfg: Config = DEFAULT_CONFIG) -> int:
    """Sortea palabras de `next_word` hasta obtener una < T y la mapea a una cara."""
    while True:
        value = next_word()
        if value < cfg.FAIR_LIMIT:
            return value // cfg.FAIR_QUOTIENT + 1


def is_valid_pair(dice: Sequence[int], cfg: Config = DEFAULT_CONFIG) -> bool:
    return len(dice) == 2 and all(1 <= d <= cfg.FACES for d in dice)
