"""Tests for engine models, errors and settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from hexline.config import Settings
from hexline.engine.errors import (
    ContractViolationError,
    GameEngineError,
    InvalidGridError,
    UnknownFigureError,
)
from hexline.engine.models import Action, ActionType, Event, EventType, GameConfig
from hexline.engine.protocol import FigureGenerator
from hexline.game.generator import WeightedFigureGenerator


class TestAction:
    def test_place_helper(self) -> None:
        action = Action.place("f1", 2, -1)
        assert action.action_type == ActionType.PLACE_FIGURE
        assert action.payload == {"figure_id": "f1", "q": 2, "r": -1}

    def test_select_and_deal(self) -> None:
        assert Action.select("f2").payload == {"figure_id": "f2"}
        assert Action.deal().action_type == ActionType.GENERATE_INITIAL_FIGURES

    def test_string_action_type_coerced(self) -> None:
        assert Action(action_type="select_figure").action_type == ActionType.SELECT_FIGURE

    def test_unknown_action_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Action(action_type="undo")

    def test_serialises(self) -> None:
        data = Action.place("f1", 0, 0).model_dump(mode="json")
        assert data["action_type"] == "place_figure"


class TestEvent:
    def test_defaults(self) -> None:
        event = Event(event_type=EventType.GAME_OVER, payload={"final_score": 10})
        assert event.model_dump(mode="json") == {
            "event_type": "game_over",
            "payload": {"final_score": 10},
        }


class TestGameConfig:
    def test_defaults(self) -> None:
        config = GameConfig()
        assert config.radius == 4
        assert config.random_seed is None

    def test_unknown_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GameConfig(hand_size=4)


class TestErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(UnknownFigureError, ContractViolationError)
        assert issubclass(InvalidGridError, ContractViolationError)
        assert issubclass(ContractViolationError, GameEngineError)

    def test_unknown_figure_message(self) -> None:
        err = UnknownFigureError("f9", ["f1", "f2"])
        assert "f9" in str(err)
        assert "f1, f2" in str(err)

    def test_invalid_grid_keeps_radius(self) -> None:
        assert InvalidGridError(-2).radius == -2


class TestProtocol:
    def test_generator_satisfies_protocol(self) -> None:
        assert isinstance(WeightedFigureGenerator(seed=0), FigureGenerator)

    def test_plain_function_does_not(self) -> None:
        assert not isinstance(lambda: None, FigureGenerator)


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("HEXLINE_GRID_RADIUS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.grid_radius == 4
        assert not hasattr(settings, "hand_size")

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HEXLINE_GRID_RADIUS", "3")
        monkeypatch.setenv("hexline_log_level", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.grid_radius == 3
        assert settings.log_level == "DEBUG"
