from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional
import copy

from dicerng.config import Config, DEFAULT_CONFIG
from dicerng.types import DicePair, Variant


def key_words(value: int, count: int, bits: int = 32) -> List[int]:
    """
    Exporta `value` como palabras de `bits` bits, la menos significativa primero,
    rellenando con ceros o truncando hasta `count` palabras.
    """
    mask = (1 << bits) - 1
    words = []
    for _ in range(count):
        words.append(value & mask)
        value >>= bits
    return words


class DiceGenerator(ABC):
    """Contrato comun de los siete generadores de dados."""

    variant: Variant

    def __init__(self, cfg: Config = DEFAULT_CONFIG) -> None:
        self.cfg = cfg

    @abstractmethod
    def roll(self) -> DicePair:
        """Devuelve un par de dados. Un valor fuera de [1, 6] indica fallo de la fuente."""

    def check_seedable(self) -> None:
        """Lanza ConfigurationError si el generador todavia no acepta semillas."""

    def seed(self, n: int) -> None:
        """Semilla nativa de 32 bits. No-op para las fuentes externas."""

    def seed_extended(self, value: int) -> None:
        self.seed(value & self.cfg.WORD_MASK)

    @property
    def needs_seed(self) -> bool:
        return False

    def activate(self) -> None:
        """Se llama cada vez que el contexto vuelve a seleccionar este generador."""

    def draws_consumed(self, dice: DicePair) -> int:
        return 2

    def report_seed(self) -> Optional[str]:
        return None

    def report_counter(self, count: int) -> Optional[str]:
        return None

    def close(self) -> None:
        pass

    def duplicate(self) -> "DiceGenerator":
        return copy.deepcopy(self)
