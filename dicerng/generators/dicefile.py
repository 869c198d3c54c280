from __future__ import annotations
from typing import BinaryIO, Optional
import logging

from dicerng.errors import ConfigurationError, SourceExhausted
from dicerng.generators.base import DiceGenerator
from dicerng.types import DicePair, Variant

logger = logging.getLogger(__name__)

FAILED_READ = -1


class DiceFileGenerator(DiceGenerator):
    """
    Lee dados de un archivo byte a byte. Solo cuentan '1'..'6'; el resto se salta.
    Al llegar al final se rebobina y se sigue leyendo.
    """

    variant = Variant.FILE

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.path: Optional[str] = None
        self._fh: Optional[BinaryIO] = None

    @property
    def is_open(self) -> bool:
        return self._fh is not None

    def open(self, path: str) -> None:
        try:
            fh = open(path, "rb")
        except OSError as exc:
            raise ConfigurationError(f"Cannot open dice file {path}: {exc}") from exc
        self.close()
        self.path = path
        self._fh = fh

    def activate(self) -> None:
        if self._fh is None and self.path is not None:
            self.open(self.path)

    def _read_die(self) -> int:
        fh = self._fh
        rewound = False
        while True:
            try:
                byte = fh.read(1)
            except OSError as exc:
                raise SourceExhausted(f"error reading dice file {self.path}: {exc}") from exc
            if not byte:
                if rewound:
                    raise SourceExhausted(f"dice file {self.path} contains no dice")
                logger.info("Rewinding dice file (%s)", self.path)
                fh.seek(0)
                rewound = True
            elif b"1" <= byte <= b"6":
                return byte[0] - ord("0")

    def read_die(self) -> int:
        if self._fh is None:
            return FAILED_READ
        try:
            return self._read_die()
        except SourceExhausted as exc:
            logger.error("%s", exc)
            return FAILED_READ

    def roll(self) -> DicePair:
        return self.read_die(), self.read_die()

    def report_seed(self) -> Optional[str]:
        return f"Reading dice from file: {self.path}"

    def report_counter(self, count: int) -> Optional[str]:
        return f"Number of dice read from current file: {count}."

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def duplicate(self) -> "DiceFileGenerator":
        twin = DiceFileGenerator(cfg=self.cfg)
        twin.path = self.path
        if self._fh is not None:
            twin.open(self.path)
            twin._fh.seek(self._fh.tell())
        return twin
