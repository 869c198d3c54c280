"""
Generadores que delegan en colaboradores externos: entrada manual y random.org.
"""
from __future__ import annotations
from typing import Optional, Protocol
import logging

from dicerng.errors import RemoteFailure
from dicerng.generators.base import DiceGenerator
from dicerng.types import DicePair, Variant

logger = logging.getLogger(__name__)


class ManualDiceEntry(Protocol):
    def read_dice(self) -> DicePair:
        """Par ya validado en [1, 6]."""
        ...


class RemoteDiceSource(Protocol):
    def draw_die(self) -> int:
        """Un dado en [1, 6]; lanza RemoteFailure si el servicio falla."""
        ...


class ManualGenerator(DiceGenerator):
    variant = Variant.MANUAL

    def __init__(self, entry: ManualDiceEntry, **kwargs) -> None:
        super().__init__(**kwargs)
        self.entry = entry

    def roll(self) -> DicePair:
        first, second = self.entry.read_dice()
        return first, second

    def draws_consumed(self, dice: DicePair) -> int:
        return 0

    def duplicate(self) -> "ManualGenerator":
        return ManualGenerator(self.entry, cfg=self.cfg)


class RandomOrgGenerator(DiceGenerator):
    variant = Variant.RANDOM_ORG

    def __init__(self, source: RemoteDiceSource, owns_source: bool = False, **kwargs) -> None:
        super().__init__(**kwargs)
        self.source = source
        # solo se cierra la fuente si la creo el propio motor
        self.owns_source = owns_source

    def _draw(self) -> int:
        try:
            return self.source.draw_die()
        except RemoteFailure as exc:
            logger.warning("Could not get dice from random.org: %s", exc)
            return 0

    def roll(self) -> DicePair:
        first = self._draw()
        # si el primero fallo no se insiste con el segundo
        second = self._draw() if first > 0 else first
        return first, second

    def draws_consumed(self, dice: DicePair) -> int:
        return sum(1 for d in dice if d > 0)

    def report_counter(self, count: int) -> Optional[str]:
        used = getattr(self.source, "used_in_batch", None)
        if used is not None:
            count = used
        return f"Number of dice used in current batch: {count}."

    def close(self) -> None:
        close = getattr(self.source, "close", None)
        if self.owns_source and close is not None:
            close()

    def duplicate(self) -> "RandomOrgGenerator":
        # la conexion remota se comparte; no tiene estado reproducible que copiar
        return RandomOrgGenerator(self.source, cfg=self.cfg)
