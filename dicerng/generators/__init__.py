from __future__ import annotations
from typing import Callable, Dict, Optional

from dicerng.config import Config, DEFAULT_CONFIG
from dicerng.generators.base import DiceGenerator, key_words
from dicerng.generators.bbs import BBSGenerator
from dicerng.generators.dicefile import DiceFileGenerator
from dicerng.generators.external import (
    ManualDiceEntry,
    ManualGenerator,
    RandomOrgGenerator,
    RemoteDiceSource,
)
from dicerng.generators.isaac import IsaacGenerator
from dicerng.generators.md5 import MD5Generator
from dicerng.generators.mersenne import MersenneGenerator
from dicerng.types import Variant

__all__ = [
    "BBSGenerator",
    "DiceFileGenerator",
    "DiceGenerator",
    "IsaacGenerator",
    "MD5Generator",
    "ManualDiceEntry",
    "ManualGenerator",
    "MersenneGenerator",
    "RandomOrgGenerator",
    "RemoteDiceSource",
    "key_words",
    "make_generator",
]

_NATIVE: Dict[Variant, Callable[..., DiceGenerator]] = {
    Variant.BBS: BBSGenerator,
    Variant.ISAAC: IsaacGenerator,
    Variant.MD5: MD5Generator,
    Variant.MERSENNE: MersenneGenerator,
    Variant.FILE: DiceFileGenerator,
}


def make_generator(
    variant: Variant,
    cfg: Config = DEFAULT_CONFIG,
    manual: Optional[ManualDiceEntry] = None,
    remote: Optional[RemoteDiceSource] = None,
    owns_remote: bool = False,
) -> DiceGenerator:
    if variant in _NATIVE:
        return _NATIVE[variant](cfg=cfg)
    if variant is Variant.MANUAL:
        if manual is None:
            from dicerng.providers import ConsoleDiceEntry

            manual = ConsoleDiceEntry()
        return ManualGenerator(manual, cfg=cfg)
    if variant is Variant.RANDOM_ORG:
        if remote is None:
            from dicerng.providers import RandomOrgClient

            return RandomOrgGenerator(RandomOrgClient(cfg=cfg), owns_source=True, cfg=cfg)
        return RandomOrgGenerator(remote, owns_source=owns_remote, cfg=cfg)
    raise ValueError(f"no generator for {variant}")
