"""
Colaboradores externos concretos: entrada manual por consola y el cliente de random.org.
"""
from __future__ import annotations
from typing import Callable, List, Optional
import logging
import re

import requests

from dicerng.config import Config, DEFAULT_CONFIG
from dicerng.errors import RemoteFailure
from dicerng.types import DicePair

logger = logging.getLogger(__name__)

_DICE_RE = re.compile(r"^\s*([1-6])\s*[, ]?\s*([1-6])\s*$")


def parse_manual_dice(text: str) -> Optional[DicePair]:
    """Acepta "3 5", "3,5" o "35". Devuelve None si no es un par valido."""
    match = _DICE_RE.match(text)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


class ConsoleDiceEntry:
    """Pide los dados por consola hasta que el operador escribe un par valido."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        prompt: str = "Enter dice: ",
    ) -> None:
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.prompt = prompt

    def read_dice(self) -> DicePair:
        while True:
            dice = parse_manual_dice(self.input_fn(self.prompt))
            if dice is not None:
                return dice
            self.output_fn("You must enter two numbers between 1 and 6.")


class RandomOrgClient:
    """
    Trae dados de www.random.org por lotes y los entrega de a uno.
    `used_in_batch` cuenta los dados consumidos del lote actual.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        cfg: Config = DEFAULT_CONFIG,
        url: Optional[str] = None,
        batch_size: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.cfg = cfg
        self.url = url or cfg.RANDOM_ORG_URL
        self.batch_size = batch_size or cfg.RANDOM_ORG_BATCH
        self.timeout = timeout if timeout is not None else cfg.RANDOM_ORG_TIMEOUT
        self._owns_session = session is None
        self._session: Optional[requests.Session] = session
        self._batch: List[int] = []
        self.used_in_batch = 0

    def _fetch_batch(self) -> List[int]:
        params = {
            "num": self.batch_size,
            "min": 1,
            "max": 6,
            "col": 1,
            "base": 10,
            "format": "plain",
            "rnd": "new",
        }
        if self._session is None:
            self._session = requests.Session()
        try:
            response = self._session.get(self.url, params=params, timeout=self.timeout)
        except requests.Timeout as exc:
            raise RemoteFailure("timeout talking to random.org") from exc
        except requests.RequestException as exc:
            raise RemoteFailure(str(exc)[:256]) from exc
        if response.status_code >= 400:
            raise RemoteFailure(f"http_{response.status_code}")
        try:
            dice = [int(tok) for tok in response.text.split()]
        except ValueError as exc:
            raise RemoteFailure("unexpected answer from random.org") from exc
        if not dice or any(d < 1 or d > 6 for d in dice):
            raise RemoteFailure("unexpected answer from random.org")
        logger.info("Fetched %d dice from random.org", len(dice))
        return dice

    def draw_die(self) -> int:
        if not self._batch:
            # lista invertida: pop() entrega en el orden recibido
            self._batch = list(reversed(self._fetch_batch()))
            self.used_in_batch = 0
        self.used_in_batch += 1
        return self._batch.pop()

    def close(self) -> None:
        """Cierra la sesion HTTP propia; una sesion inyectada queda a cargo de quien la paso."""
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None
