"""Per-tick A* planning of a single next move on a 2D grid."""

from .core.grid import Coord, Grid
from .planning.errors import ContractViolation, PlannerContractError
from .planning.heuristics import DIAGONAL_COST, STRAIGHT_COST, octile_distance
from .planning.stepwise import PlanStatus, StepPlan, compute_next_position, plan_next_step

__version__ = "0.1.0"

__all__ = [
    "Coord",
    "Grid",
    "ContractViolation",
    "PlannerContractError",
    "DIAGONAL_COST",
    "STRAIGHT_COST",
    "octile_distance",
    "PlanStatus",
    "StepPlan",
    "compute_next_position",
    "plan_next_step",
]
