from __future__ import annotations


class DiceError(Exception):
    """Base de todos los errores del motor de dados."""


class ConfigurationError(DiceError, ValueError):
    """Modulo, semilla, factor, ruta o nombre de generador invalidos.

    Se lanza antes de tocar el contexto: el estado previo queda intacto.
    """


class SeedingFailure(DiceError):
    """BBS no encontro una semilla sin ciclos cortos; el contexto queda inutilizable."""


class SourceExhausted(DiceError):
    """El archivo de dados no se puede leer (distinto de llegar al final y rebobinar)."""


class RemoteFailure(DiceError):
    """Fallo del servicio remoto de numeros aleatorios."""


class MalformedRoll(DiceError):
    """Tirada fuera de [1, 6] incluso despues del fallback a Mersenne Twister."""


class ContextClosed(DiceError):
    """Operacion sobre un contexto ya destruido."""
