"""
Superficie de configuracion del operador: YAML o dict -> contexto listo para tirar.

Ejemplo::

    variant: bbs
    factors: ["499", "547"]
    seed: "12345"
"""
from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml

from dicerng.config import Config
from dicerng.context import RNGContext
from dicerng.errors import ConfigurationError
from dicerng.generators import ManualDiceEntry, RemoteDiceSource
from dicerng.providers import RandomOrgClient
from dicerng.seeding import (
    acquire_system_seed,
    install_seed_text,
    open_dice_file,
    set_bbs_factors,
    set_bbs_modulus,
)
from dicerng.types import Variant

SYSTEM_SEED = "system"


@dataclass
class RNGSettings:
    variant: str = Variant.MERSENNE.value
    # None o "system": entropia del sistema
    seed: Optional[Union[str, int]] = None
    modulus: Optional[str] = None
    factors: Optional[Tuple[str, str]] = None
    dice_file: Optional[str] = None
    random_org_url: Optional[str] = None
    random_org_batch: Optional[int] = None
    timeout: Optional[float] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RNGSettings":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown dice settings: {', '.join(unknown)}")
        values: Dict[str, Any] = dict(data)
        factors = values.get("factors")
        if factors is not None:
            if isinstance(factors, (str, int)) or len(factors) != 2:
                raise ConfigurationError("factors must be a list of two decimal values")
            values["factors"] = (str(factors[0]), str(factors[1]))
        if values.get("modulus") is not None:
            values["modulus"] = str(values["modulus"])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_settings(path: Union[str, Path]) -> RNGSettings:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a mapping of dice settings")
    return RNGSettings.from_mapping(data)


def build_context(
    settings: RNGSettings,
    cfg: Optional[Config] = None,
    manual: Optional[ManualDiceEntry] = None,
    remote: Optional[RemoteDiceSource] = None,
) -> RNGContext:
    variant = Variant.from_name(settings.variant)
    owns_remote = False
    if variant is Variant.RANDOM_ORG and remote is None:
        kwargs: Dict[str, Any] = {"url": settings.random_org_url, "batch_size": settings.random_org_batch}
        if cfg is not None:
            kwargs["cfg"] = cfg
        if settings.timeout is not None:
            kwargs["timeout"] = settings.timeout
        remote = RandomOrgClient(**kwargs)
        owns_remote = True

    ctx = RNGContext(variant, cfg, manual=manual, remote=remote, owns_remote=owns_remote)
    try:
        if variant is Variant.BBS:
            if settings.factors is not None:
                set_bbs_factors(ctx, *settings.factors)
            elif settings.modulus is not None:
                set_bbs_modulus(ctx, settings.modulus)
            else:
                raise ConfigurationError("bbs needs either a modulus or two factors")
        if variant is Variant.FILE:
            if not settings.dice_file:
                raise ConfigurationError("file generator needs dice_file")
            open_dice_file(ctx, settings.dice_file)

        if settings.seed is None or str(settings.seed).strip().lower() == SYSTEM_SEED:
            acquire_system_seed(ctx)
        else:
            install_seed_text(ctx, settings.seed)
    except Exception:
        ctx.close()
        raise
    return ctx
