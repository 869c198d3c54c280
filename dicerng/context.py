from __future__ import annotations
from typing import Dict, Optional
import logging

from dicerng.config import Config, DEFAULT_CONFIG
from dicerng.errors import ContextClosed, MalformedRoll
from dicerng.generators import DiceGenerator, ManualDiceEntry, RemoteDiceSource, make_generator
from dicerng.mapper import is_valid_pair
from dicerng.types import DicePair, Variant

logger = logging.getLogger(__name__)

FALLBACK_VARIANT = Variant.MERSENNE


class RNGContext:
    """
    Estado de un flujo independiente de dados.

    Guarda un generador por variante (los inactivos conservan su estado),
    la semilla nativa/extendida y el contador de llamadas desde la ultima
    semilla. Solo un generador esta activo para `roll()`.
    """

    def __init__(
        self,
        variant: Variant = Variant.MERSENNE,
        cfg: Optional[Config] = None,
        manual: Optional[ManualDiceEntry] = None,
        remote: Optional[RemoteDiceSource] = None,
        owns_remote: bool = False,
    ) -> None:
        self.cfg = cfg or DEFAULT_CONFIG
        self.variant = variant
        self.seed = 0
        self.seed_extended = 0
        self.counter = 0
        self.seeded_from_entropy = False
        self._manual = manual
        self._remote = remote
        # fuente remota creada para este contexto: se cierra junto con su generador
        self._owns_remote = owns_remote
        self._slots: Dict[Variant, DiceGenerator] = {}
        self._closed = False

    @classmethod
    def create(cls, variant: Variant = Variant.MERSENNE, system_seed: bool = False, **kwargs) -> "RNGContext":
        ctx = cls(variant, **kwargs)
        if system_seed:
            from dicerng.seeding import acquire_system_seed

            acquire_system_seed(ctx)
        return ctx

    # --- slots ---

    @property
    def closed(self) -> bool:
        return self._closed

    def ensure_open(self) -> None:
        if self._closed:
            raise ContextClosed("dice context already destroyed")

    def generator(self, variant: Optional[Variant] = None) -> DiceGenerator:
        variant = variant or self.variant
        gen = self._slots.get(variant)
        if gen is None:
            gen = make_generator(
                variant, self.cfg, manual=self._manual, remote=self._remote, owns_remote=self._owns_remote
            )
            self._slots[variant] = gen
        return gen

    @property
    def active(self) -> DiceGenerator:
        return self.generator(self.variant)

    def set_variant(self, variant: Variant) -> None:
        self.ensure_open()
        if variant is self.variant:
            return
        previous = self._slots.get(self.variant)
        if previous is not None:
            # libera recursos (archivo) pero conserva el resto del estado
            previous.close()
        self.variant = variant
        self.active.activate()

    # --- tiradas ---

    def _roll_active(self) -> DicePair:
        gen = self.active
        if gen.needs_seed:
            gen.seed_extended(self.seed_extended)
        dice = gen.roll()
        self.counter += gen.draws_consumed(dice)
        return dice

    def roll(self) -> DicePair:
        self.ensure_open()
        dice = self._roll_active()
        if is_valid_pair(dice, self.cfg):
            return dice
        logger.error(
            "Your dice generator isn't working (%s gave %s). Falling back on %s.",
            self.variant.display_name,
            dice,
            FALLBACK_VARIANT.display_name,
        )
        self.set_variant(FALLBACK_VARIANT)
        dice = self._roll_active()
        if not is_valid_pair(dice, self.cfg):
            raise MalformedRoll(f"fallback generator produced {dice}")
        return dice

    # --- ciclo de vida ---

    @property
    def dice_file_name(self) -> Optional[str]:
        gen = self._slots.get(Variant.FILE)
        return gen.path if gen is not None else None

    def duplicate(self) -> "RNGContext":
        """Copia profunda: el archivo de dados se reabre en la misma posicion."""
        self.ensure_open()
        twin = RNGContext(self.variant, self.cfg, manual=self._manual, remote=self._remote)
        twin.seed = self.seed
        twin.seed_extended = self.seed_extended
        twin.counter = self.counter
        twin.seeded_from_entropy = self.seeded_from_entropy
        twin._slots = {v: gen.duplicate() for v, gen in self._slots.items()}
        return twin

    def close(self) -> None:
        if self._closed:
            return
        for gen in self._slots.values():
            gen.close()
        self._slots.clear()
        self._closed = True

    def __enter__(self) -> "RNGContext":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"RNGContext(variant={self.variant.name}, seed={self.seed_extended}, counter={self.counter})"
