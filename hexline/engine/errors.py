from __future__ import annotations


class GameEngineError(Exception):
    """Base class for engine errors."""
    pass


class ContractViolationError(GameEngineError):
    """Caller broke an engine precondition. Never a normal gameplay outcome."""
    pass


class UnknownFigureError(ContractViolationError):
    """Action referenced a figure id that is not in the active set."""

    def __init__(self, figure_id: str, active_ids: list[str] | None = None):
        self.figure_id = figure_id
        self.active_ids = active_ids or []
        super().__init__(
            f"Unknown figure id {figure_id!r} (active: {', '.join(self.active_ids) or 'none'})"
        )


class InvalidGridError(ContractViolationError):
    """Grid constructed with a non-positive radius."""

    def __init__(self, radius: int):
        self.radius = radius
        super().__init__(f"Grid radius must be positive, got {radius}")


class UnknownActionError(ContractViolationError):
    """Action type the rule engine does not handle."""

    def __init__(self, action_type: str):
        self.action_type = action_type
        super().__init__(f"Unknown action type: {action_type}")
