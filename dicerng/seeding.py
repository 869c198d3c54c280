"""
Instalacion de semillas y configuracion del modulo de Blum, Blum y Shub.

Todas las funciones validan la entrada antes de tocar el contexto: un
ConfigurationError deja el estado previo intacto.
"""
from __future__ import annotations
from typing import Tuple, Union
import logging
import os
import time

from dicerng.context import RNGContext
from dicerng.errors import ConfigurationError
from dicerng.generators import BBSGenerator, DiceFileGenerator
from dicerng.types import Variant

logger = logging.getLogger(__name__)


def parse_decimal(text: Union[str, int], what: str = "value", minimum: int = 0) -> int:
    if isinstance(text, bool):
        raise ConfigurationError(f"Invalid {what}: {text!r}")
    if isinstance(text, int):
        value = text
    else:
        cleaned = str(text).strip()
        if not cleaned.isdigit():
            raise ConfigurationError(f"Invalid {what}: {text!r}")
        value = int(cleaned)
    if value < minimum:
        raise ConfigurationError(f"Invalid {what}: {value} (must be >= {minimum})")
    return value


def install_seed(ctx: RNGContext, n: int) -> None:
    """Semilla nativa de 32 bits en el generador activo; reinicia el contador."""
    ctx.ensure_open()
    if isinstance(n, bool) or not isinstance(n, int) or not 0 <= n <= ctx.cfg.WORD_MASK:
        raise ConfigurationError(f"Native seed must be an integer in [0, 2^32), got {n!r}")
    gen = ctx.active
    gen.check_seedable()
    ctx.seed = n
    ctx.seed_extended = n
    ctx.counter = 0
    ctx.seeded_from_entropy = False
    gen.seed(n)


def install_seed_extended(ctx: RNGContext, value: int) -> None:
    """Semilla de precision arbitraria; los generadores la expanden a su formato de clave."""
    ctx.ensure_open()
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigurationError(f"Seed must be a non-negative integer, got {value!r}")
    gen = ctx.active
    gen.check_seedable()
    ctx.seed = value & ctx.cfg.WORD_MASK
    ctx.seed_extended = value
    ctx.counter = 0
    ctx.seeded_from_entropy = False
    gen.seed_extended(value)


def install_seed_text(ctx: RNGContext, text: Union[str, int]) -> None:
    install_seed_extended(ctx, parse_decimal(text, "seed"))


def read_entropy(count: int) -> bytes:
    return os.urandom(count)


def clock_seed() -> int:
    us = time.time_ns() // 1000
    return ((us >> 32) ^ (us & 0xFFFFFFFF)) & 0xFFFFFFFF


def acquire_system_seed(ctx: RNGContext) -> Tuple[bool, int]:
    """
    Siembra desde la entropia del sistema (512 bits) o, si no hay, desde el reloj.
    Retorna (hubo_entropia, semilla_instalada) para mostrarlo al operador.
    """
    try:
        raw = read_entropy(ctx.cfg.ENTROPY_BYTES)
    except (OSError, NotImplementedError) as exc:
        logger.warning("No system entropy available (%s); seeding from the clock.", exc)
        raw = b""
    if len(raw) == ctx.cfg.ENTROPY_BYTES:
        value = int.from_bytes(raw, "little")
        install_seed_extended(ctx, value)
        ctx.seeded_from_entropy = True
        return True, value
    n = clock_seed()
    install_seed(ctx, n)
    return False, n


def _bbs(ctx: RNGContext) -> BBSGenerator:
    ctx.ensure_open()
    gen = ctx.generator(Variant.BBS)
    if not isinstance(gen, BBSGenerator):
        raise TypeError(f"expected a BBSGenerator for {Variant.BBS.value}, got {type(gen).__name__}")
    return gen


def set_bbs_modulus(ctx: RNGContext, text: Union[str, int]) -> int:
    modulus = parse_decimal(text, "modulus", minimum=1)
    _bbs(ctx).set_modulus(modulus)
    return modulus


def set_bbs_factors(ctx: RNGContext, p_text: Union[str, int], q_text: Union[str, int]) -> Tuple[int, int]:
    """Factores candidatos; los invalidos avanzan al siguiente primo de Blum."""
    p = parse_decimal(p_text, "Blum factor", minimum=1)
    q = parse_decimal(q_text, "Blum factor", minimum=1)
    return _bbs(ctx).set_factors(p, q)


def open_dice_file(ctx: RNGContext, path: str) -> None:
    """Abre (o reemplaza) el archivo de dados; el contador vuelve a cero."""
    ctx.ensure_open()
    gen = ctx.generator(Variant.FILE)
    if not isinstance(gen, DiceFileGenerator):
        raise TypeError(f"expected a DiceFileGenerator for {Variant.FILE.value}, got {type(gen).__name__}")
    gen.open(path)
    if ctx.variant is not Variant.FILE:
        # solo el generador activo mantiene el archivo abierto
        gen.close()
    ctx.counter = 0
