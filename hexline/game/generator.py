"""Weighted random figure generator.

The rule engine only requires a ``generate_figure()`` callable; this is the
default implementation used by the simulator, arena and tests.
"""

from __future__ import annotations

import random
from typing import Mapping

from hexline.game.figures import NUM_ROTATIONS, SHAPES, Figure

# Small shapes are common, 4-cell shapes rarer
DEFAULT_WEIGHTS: dict[str, float] = {
    "mono": 1.0,
    "duo": 3.0,
    "tri_line": 3.0,
    "tri_bent": 3.0,
    "tri_triangle": 3.0,
    "tetra_bar": 2.0,
    "tetra_wave": 2.0,
    "tetra_diamond": 2.0,
    "tetra_propeller": 1.5,
    "tetra_hook": 2.0,
    "tetra_arch": 1.5,
}

COLORS: list[str] = ["red", "orange", "yellow", "green", "blue", "purple"]


class WeightedFigureGenerator:
    """Draws figures by shape weight with a uniformly random rotation and color."""

    def __init__(
        self,
        seed: int | None = None,
        weights: Mapping[str, float] | None = None,
    ) -> None:
        weights = dict(weights if weights is not None else DEFAULT_WEIGHTS)
        for name, weight in weights.items():
            if name not in SHAPES:
                raise ValueError(f"Unknown shape in weights: {name!r}")
            if weight < 0:
                raise ValueError(f"Negative weight for {name!r}: {weight}")
        if not any(w > 0 for w in weights.values()):
            raise ValueError("At least one shape needs a positive weight")

        self._shapes = list(weights.keys())
        self._weights = [weights[s] for s in self._shapes]
        self._rng = random.Random(seed)
        self._counter = 0

    def generate_figure(self) -> Figure:
        self._counter += 1
        shape = self._rng.choices(self._shapes, weights=self._weights, k=1)[0]
        return Figure(
            figure_id=f"f{self._counter}",
            shape=shape,
            rotation=self._rng.randrange(NUM_ROTATIONS),
            color=self._rng.choice(COLORS),
        )

    __call__ = generate_figure


class SequenceFigureGenerator:
    """Replays a fixed list of (shape, rotation) pairs, then repeats the last.

    Used for scripted scenarios where the next hand must be known.
    """

    def __init__(self, shapes: list[tuple[str, int]], color: str = "gray") -> None:
        if not shapes:
            raise ValueError("SequenceFigureGenerator needs at least one shape")
        self._shapes = list(shapes)
        self._color = color
        self._counter = 0

    def generate_figure(self) -> Figure:
        shape, rotation = self._shapes[min(self._counter, len(self._shapes) - 1)]
        self._counter += 1
        return Figure(
            figure_id=f"f{self._counter}",
            shape=shape,
            rotation=rotation,
            color=self._color,
        )

    __call__ = generate_figure
