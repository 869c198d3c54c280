from __future__ import annotations
from typing import Any, Dict, Optional

from dicerng.context import RNGContext

NOT_APPLICABLE = "You cannot show the seed with this random number generator."


def report_seed(ctx: RNGContext) -> str:
    """Texto de la semilla actual para el operador."""
    text = ctx.active.report_seed()
    return text if text is not None else NOT_APPLICABLE


def report_counter(ctx: RNGContext) -> Optional[str]:
    """La redaccion depende de la variante; None si no aplica (manual, Mersenne)."""
    return ctx.active.report_counter(ctx.counter)


def describe_context(ctx: RNGContext) -> Dict[str, Any]:
    return {
        "variant": ctx.variant.value,
        "generator": ctx.variant.display_name,
        "seed": report_seed(ctx),
        "counter": report_counter(ctx),
        "calls": ctx.counter,
        "entropy_seeded": ctx.seeded_from_entropy,
        "dice_file": ctx.dice_file_name,
    }
