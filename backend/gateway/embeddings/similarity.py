"""Cosine similarity between embedding vectors.

The zero-vector case is deliberately left to IEEE-754: ``0 / 0`` gives
``nan``.  Callers that need JSON output must map non-finite results
themselves.
"""
from typing import Sequence

import numpy as np


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Return ``dot(a, b) / (|a| * |b|)`` computed in float64.

    Raises:
        ValueError: If the vectors differ in length.
    """
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    if va.shape != vb.shape:
        raise ValueError(
            f"Cannot compare vectors of different dimensions: {va.size} vs {vb.size}"
        )

    dot = np.dot(va, vb)
    magnitude = np.sqrt(np.dot(va, va)) * np.sqrt(np.dot(vb, vb))
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(dot / magnitude)


def format_percentage(similarity: float) -> str:
    """Render a similarity as a percentage with two decimals, e.g. ``"87.65%"``."""
    return f"{similarity * 100:.2f}%"
