"""Tests for polyhex shapes, rotation and the figure generators."""

from __future__ import annotations

import pytest

from hexline.game.figures import (
    NUM_ROTATIONS,
    ROTATIONS,
    SHAPES,
    Figure,
    rotate_shape,
)
from hexline.game.generator import SequenceFigureGenerator, WeightedFigureGenerator
from hexline.game.types import AxialCoord, cube_distance


def _is_connected(cells: tuple[AxialCoord, ...]) -> bool:
    seen = {cells[0]}
    frontier = [cells[0]]
    while frontier:
        current = frontier.pop()
        for other in cells:
            if other not in seen and cube_distance(current, other) == 1:
                seen.add(other)
                frontier.append(other)
    return len(seen) == len(cells)


class TestShapes:
    @pytest.mark.parametrize("name", list(SHAPES))
    def test_contains_origin(self, name: str) -> None:
        assert AxialCoord(0, 0) in SHAPES[name]

    @pytest.mark.parametrize("name", list(SHAPES))
    def test_offsets_distinct(self, name: str) -> None:
        assert len(set(SHAPES[name])) == len(SHAPES[name])

    @pytest.mark.parametrize("name", list(SHAPES))
    def test_between_one_and_four_cells(self, name: str) -> None:
        assert 1 <= len(SHAPES[name]) <= 4

    @pytest.mark.parametrize("name", list(SHAPES))
    def test_connected(self, name: str) -> None:
        assert _is_connected(SHAPES[name])


class TestRotation:
    def test_six_rotations_per_shape(self) -> None:
        for name in SHAPES:
            assert len(ROTATIONS[name]) == NUM_ROTATIONS

    def test_rotation_zero_is_base(self) -> None:
        for name, base in SHAPES.items():
            assert ROTATIONS[name][0] == base

    def test_six_steps_return_to_base(self) -> None:
        shape = SHAPES["tetra_hook"]
        rotated = shape
        for _ in range(6):
            rotated = rotate_shape(rotated)
        assert rotated == shape

    def test_single_step_maps_east_to_south_east(self) -> None:
        assert rotate_shape((AxialCoord(1, 0),)) == (AxialCoord(0, 1),)

    def test_rotation_preserves_pairwise_distance(self) -> None:
        base = SHAPES["tetra_arch"]
        for variant in ROTATIONS["tetra_arch"]:
            for i in range(len(base)):
                for j in range(len(base)):
                    assert cube_distance(base[i], base[j]) == cube_distance(variant[i], variant[j])

    def test_rotations_stay_distinct(self) -> None:
        for name in SHAPES:
            for variant in ROTATIONS[name]:
                assert len(set(variant)) == len(variant)


class TestFigure:
    def test_cells_follow_rotation(self) -> None:
        fig = Figure(figure_id="f1", shape="duo", rotation=2)
        assert fig.cells == ROTATIONS["duo"][2]

    def test_rotated_returns_new_figure(self) -> None:
        fig = Figure(figure_id="f1", shape="tri_bent", rotation=5)
        turned = fig.rotated()
        assert turned.rotation == 0
        assert fig.rotation == 5
        assert SHAPES["tri_bent"] == ROTATIONS["tri_bent"][0]

    def test_size(self) -> None:
        assert Figure(figure_id="f1", shape="tetra_bar").size == 4

    @pytest.mark.parametrize("rotation", [-1, 6, 10])
    def test_invalid_rotation(self, rotation: int) -> None:
        with pytest.raises(ValueError):
            Figure(figure_id="f1", shape="mono", rotation=rotation)

    def test_unknown_shape(self) -> None:
        with pytest.raises(ValueError):
            Figure(figure_id="f1", shape="pentagon")

    def test_to_dict(self) -> None:
        data = Figure(figure_id="f9", shape="duo", color="red").to_dict()
        assert data["figure_id"] == "f9"
        assert data["cells"] == [[0, 0], [1, 0]]


class TestWeightedGenerator:
    def test_deterministic_per_seed(self) -> None:
        a = WeightedFigureGenerator(seed=7)
        b = WeightedFigureGenerator(seed=7)
        assert [a.generate_figure() for _ in range(20)] == [b.generate_figure() for _ in range(20)]

    def test_unique_ids(self) -> None:
        gen = WeightedFigureGenerator(seed=1)
        ids = [gen.generate_figure().figure_id for _ in range(50)]
        assert len(set(ids)) == 50

    def test_respects_zero_weights(self) -> None:
        gen = WeightedFigureGenerator(seed=3, weights={"mono": 1.0, "duo": 0.0})
        assert {gen.generate_figure().shape for _ in range(30)} == {"mono"}

    def test_unknown_shape_weight_rejected(self) -> None:
        with pytest.raises(ValueError):
            WeightedFigureGenerator(weights={"blob": 1.0})

    def test_all_zero_weights_rejected(self) -> None:
        with pytest.raises(ValueError):
            WeightedFigureGenerator(weights={"mono": 0.0})

    def test_callable(self) -> None:
        gen = WeightedFigureGenerator(seed=0)
        assert isinstance(gen(), Figure)


class TestSequenceGenerator:
    def test_replays_then_repeats_last(self) -> None:
        gen = SequenceFigureGenerator([("mono", 0), ("duo", 1)])
        figures = [gen.generate_figure() for _ in range(4)]
        assert [f.shape for f in figures] == ["mono", "duo", "duo", "duo"]
        assert [f.figure_id for f in figures] == ["f1", "f2", "f3", "f4"]

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError):
            SequenceFigureGenerator([])
