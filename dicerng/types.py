from __future__ import annotations
from enum import Enum
from typing import Dict, Tuple

from dicerng.errors import ConfigurationError

DicePair = Tuple[int, int]


class Variant(Enum):
    """Algoritmos intercambiables para generar los dos dados de cada turno."""

    BBS = "bbs"
    ISAAC = "isaac"
    MD5 = "md5"
    MERSENNE = "mersenne"
    MANUAL = "manual"
    RANDOM_ORG = "random.org"
    FILE = "file"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def tooltip(self) -> str:
        return _TOOLTIPS[self]

    @property
    def is_native(self) -> bool:
        """True para los generadores deterministas (reproducibles con la misma semilla)."""
        return self in (Variant.BBS, Variant.ISAAC, Variant.MD5, Variant.MERSENNE)

    @classmethod
    def from_name(cls, name: str) -> "Variant":
        key = name.strip().lower()
        for v in cls:
            if key in (v.value, v.name.lower()):
                return v
        alias = _ALIASES.get(key)
        if alias is None:
            raise ConfigurationError(f"Unknown dice generator: {name!r}")
        return alias


_DISPLAY_NAMES: Dict[Variant, str] = {
    Variant.BBS: "Blum, Blum and Shub",
    Variant.ISAAC: "ISAAC",
    Variant.MD5: "MD5",
    Variant.MERSENNE: "Mersenne Twister",
    Variant.MANUAL: "manual dice",
    Variant.RANDOM_ORG: "www.random.org",
    Variant.FILE: "read from file",
}

_TOOLTIPS: Dict[Variant, str] = {
    Variant.BBS: "Blum, Blum and Shub's verifiably strong generator",
    Variant.ISAAC: "Bob Jenkins' Indirection, Shift, Accumulate, Add and Count cryptographic generator",
    Variant.MD5: "A generator based on the Message Digest 5 algorithm",
    Variant.MERSENNE: "Makoto Matsumoto and Takuji Nishimura's generator",
    Variant.MANUAL: "Enter each dice roll by hand",
    Variant.RANDOM_ORG: "The online non-deterministic generator from random.org",
    Variant.FILE: "Dice loaded from a file",
}

_ALIASES: Dict[str, Variant] = {
    "blum": Variant.BBS,
    "blumblumshub": Variant.BBS,
    "twister": Variant.MERSENNE,
    "mt": Variant.MERSENNE,
    "mt19937": Variant.MERSENNE,
    "randomorg": Variant.RANDOM_ORG,
    "random_org": Variant.RANDOM_ORG,
    "remote": Variant.RANDOM_ORG,
    "hash": Variant.MD5,
    "replay": Variant.FILE,
    "dicefile": Variant.FILE,
}
