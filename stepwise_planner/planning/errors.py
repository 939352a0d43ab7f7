"""Errors raised when a caller breaks the planner's input contract."""

from __future__ import annotations

from enum import Enum

from .heuristics import Coord


class ContractViolation(str, Enum):
    SOURCE_OUT_OF_BOUNDS = "source_out_of_bounds"
    DESTINATION_OUT_OF_BOUNDS = "destination_out_of_bounds"
    SOURCE_NOT_TRAVERSABLE = "source_not_traversable"
    DESTINATION_NOT_TRAVERSABLE = "destination_not_traversable"


class PlannerContractError(ValueError):
    """Source or destination is outside the grid or on a blocked cell.

    This is a programming error on the caller's side; ``violation`` says
    which condition failed and ``coord`` is the offending coordinate.
    """

    def __init__(self, violation: ContractViolation, coord: Coord) -> None:
        self.violation = violation
        self.coord = coord
        super().__init__(f"{violation.value}: {coord}")


__all__ = ["ContractViolation", "PlannerContractError"]
