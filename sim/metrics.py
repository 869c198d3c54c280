from __future__ import annotations
from typing import Any, Dict, Iterable, List, Sequence
import json
import os
import time

import numpy as np
from scipy import stats

from dicerng.types import DicePair, Variant

FACES = 6


def roll_record(index: int, variant: Variant, dice: DicePair, counter: int) -> Dict[str, Any]:
    return {
        "roll": index,
        "variant": variant.value,
        "dice": [int(dice[0]), int(dice[1])],
        "counter": counter,
    }


def write_jsonl(path: str, records: List[Dict[str, Any]]) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for r in records:
            f.write(json.dumps(r, ensure_ascii=False) + "\n")


def read_faces(path: str) -> List[int]:
    """Todas las caras (ambos dados) de un log JSONL de tiradas."""
    faces: List[int] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            if line.strip():
                faces.extend(json.loads(line).get("dice", []))
    return faces


def default_run_path(prefix: str = "runs/rolls") -> str:
    ts = time.strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{ts}.jsonl"


def face_counts(faces: Iterable[int]) -> np.ndarray:
    """Conteo por cara 1..6 (indice 0 = cara 1)."""
    arr = np.fromiter(faces, dtype=np.int64)
    if arr.size and (arr.min() < 1 or arr.max() > FACES):
        raise ValueError("face values must lie in [1, 6]")
    return np.bincount(arr - 1, minlength=FACES)


def fairness_report(faces: Sequence[int], alpha: float = 0.05) -> Dict[str, Any]:
    """
    Chi-cuadrado contra la uniforme 1/6.
    `uniform` es True si no se rechaza la hipotesis al nivel `alpha`.
    """
    counts = face_counts(faces)
    total = int(counts.sum())
    if total == 0:
        return {"total": 0, "counts": counts.tolist(), "chi2": None, "p_value": None, "uniform": None}
    chi2, p_value = stats.chisquare(counts)
    return {
        "total": total,
        "counts": counts.tolist(),
        "chi2": float(chi2),
        "p_value": float(p_value),
        "uniform": bool(p_value > alpha),
    }
