"""Noise sources for the scoring perturbation.

The scorer asks a NoiseSource for one value per prediction. Tests swap in
ZeroNoise or FixedNoise to assert exact probabilities.
"""
from __future__ import annotations

import random
from typing import Protocol


class NoiseSource(Protocol):
    def __call__(self) -> float: ...


class UniformNoise:
    """Uniform perturbation in [-amplitude, +amplitude]."""

    def __init__(
        self,
        amplitude: float = 0.01,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if amplitude < 0:
            raise ValueError(f"amplitude must be non-negative, got {amplitude}")
        self.amplitude = amplitude
        self._rng = rng if rng is not None else random.Random(seed)

    def __call__(self) -> float:
        return self._rng.uniform(-self.amplitude, self.amplitude)


class ZeroNoise:
    def __call__(self) -> float:
        return 0.0


class FixedNoise:
    def __init__(self, value: float) -> None:
        self.value = value

    def __call__(self) -> float:
        return self.value
