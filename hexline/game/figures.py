"""Polyhex figure shapes and their 6 rotations.

Each base shape is a list of axial offsets relative to the figure origin
``(0, 0)``, which every shape contains. Rotations are derived from the base
shape once at import time; a ``Figure`` only stores which rotation is active.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from hexline.game.types import AxialCoord

Shape = tuple[AxialCoord, ...]

NUM_ROTATIONS = 6


def _shape(*offsets: tuple[int, int]) -> Shape:
    return tuple(AxialCoord(q, r) for q, r in offsets)


# ── Base shapes (1 to 4 cells) ──

SHAPES: dict[str, Shape] = {
    "mono": _shape((0, 0)),
    "duo": _shape((0, 0), (1, 0)),
    "tri_line": _shape((0, 0), (1, 0), (2, 0)),
    "tri_bent": _shape((0, 0), (1, 0), (2, -1)),
    "tri_triangle": _shape((0, 0), (1, 0), (0, 1)),
    "tetra_bar": _shape((0, 0), (1, 0), (2, 0), (3, 0)),
    "tetra_wave": _shape((0, 0), (1, 0), (1, -1), (2, -1)),
    "tetra_diamond": _shape((0, 0), (1, 0), (0, 1), (1, 1)),
    "tetra_propeller": _shape((0, 0), (1, 0), (-1, 1), (0, -1)),
    "tetra_hook": _shape((0, 0), (1, 0), (2, 0), (1, -1)),
    "tetra_arch": _shape((0, 0), (1, 0), (2, -1), (2, -2)),
}


def rotate_shape(shape: Shape) -> Shape:
    """Rotate a shape 60 degrees about the origin: (q, r) -> (-r, q + r)."""
    return tuple(AxialCoord(-c.r, c.q + c.r) for c in shape)


def _build_rotations() -> dict[str, tuple[Shape, ...]]:
    rotations: dict[str, tuple[Shape, ...]] = {}
    for name, base in SHAPES.items():
        if len(set(base)) != len(base):
            raise ValueError(f"Shape {name} has overlapping offsets")
        variants: list[Shape] = []
        shape = base
        for _ in range(NUM_ROTATIONS):
            variants.append(shape)
            shape = rotate_shape(shape)
        rotations[name] = tuple(variants)
    return rotations


ROTATIONS: dict[str, tuple[Shape, ...]] = _build_rotations()
"""shape name -> 6 offset tuples, index = rotation."""


@dataclass(frozen=True)
class Figure:
    figure_id: str
    shape: str
    rotation: int = 0
    color: str = "gray"

    def __post_init__(self) -> None:
        if self.shape not in SHAPES:
            raise ValueError(f"Unknown shape: {self.shape!r}")
        if not 0 <= self.rotation < NUM_ROTATIONS:
            raise ValueError(f"Rotation must be in [0, {NUM_ROTATIONS}), got {self.rotation}")

    @property
    def cells(self) -> Shape:
        """Offsets of the active rotation."""
        return ROTATIONS[self.shape][self.rotation]

    @property
    def size(self) -> int:
        return len(SHAPES[self.shape])

    def rotated(self, steps: int = 1) -> Figure:
        return replace(self, rotation=(self.rotation + steps) % NUM_ROTATIONS)

    def to_dict(self) -> dict:
        return {
            "figure_id": self.figure_id,
            "shape": self.shape,
            "rotation": self.rotation,
            "color": self.color,
            "cells": [[c.q, c.r] for c in self.cells],
        }
