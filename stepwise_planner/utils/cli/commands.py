"""Implementations of development CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Sequence
import logging

from ...core.world import is_traversable
from ...planning.errors import PlannerContractError
from ...planning.stepwise import plan_next_step
from ..observer import install_tick_observer, summarize_events, toggle_live_fps
from ..profiling import profile_ticks
from .terminal_view import get_view

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_PATH = Path("profile.prof")


def _frontier(world: Any) -> str:
    cfg = getattr(world, "config", None)
    return cfg.planner.frontier if cfg is not None else "heap"


def _coords(args: Sequence[str]) -> tuple[int, int] | None:
    if len(args) < 2:
        return None
    try:
        return int(args[0]), int(args[1])
    except ValueError:
        return None


def pause(state: Dict[str, Any]) -> None:
    state["paused"] = True
    logger.info("Simulation paused.")


def resume(state: Dict[str, Any]) -> None:
    state["paused"] = False
    logger.info("Simulation resumed.")


def step(state: Dict[str, Any]) -> None:
    if state.get("paused", False):
        state["step"] = True
        logger.info("Stepping one tick.")
    else:
        logger.info("Simulation is not paused. Use /pause first.")


def quit_(state: Dict[str, Any]) -> None:
    state["running"] = False
    logger.info("Quit requested.")


def wall(world: Any, args: Sequence[str]) -> None:
    coord = _coords(args)
    if coord is None:
        logger.error("Usage: /wall <x> <y>")
        return
    if world.toggle_wall(*coord):
        logger.info("Tile %s is now %s", coord, world.tile_at(coord).name)
    else:
        logger.info("Tile %s cannot be toggled.", coord)


def _move_actor(world: Any, args: Sequence[str], which: str) -> None:
    coord = _coords(args)
    if coord is None:
        logger.error("Usage: /%s <x> <y>", which)
        return
    place = world.place_target if which == "target" else world.place_pursuer
    try:
        place(coord)
    except ValueError as exc:
        logger.error("Cannot move %s: %s", which, exc)
        return
    logger.info("%s moved to %s", which.capitalize(), coord)


def plan(world: Any) -> None:
    """Log what the pursuer would do this tick without moving it."""
    if world.pursuer is None or world.target is None:
        logger.info("Nothing to plan: pursuer or target missing.")
        return
    try:
        result = plan_next_step(
            world.grid, world.pursuer, world.target, is_traversable, frontier=_frontier(world)
        )
    except PlannerContractError as exc:
        logger.error("Cannot plan: %s", exc)
        return
    logger.info(
        "Plan %s: %s -> %s (next %s, %s expansions, %s nodes)",
        result.status.value, world.pursuer, world.target,
        result.position, result.expansions, result.nodes_created,
    )
    counts = summarize_events(getattr(world, "event_log", []))
    if counts:
        logger.info(
            "Events so far: %s", ", ".join(f"{kind}={n}" for kind, n in sorted(counts.items()))
        )


def view(world: Any, state: Dict[str, Any]) -> None:
    terminal = get_view()
    state["view"] = terminal.toggle()
    terminal.render(world)


def fps(world: Any, state: Dict[str, Any]) -> None:
    install_tick_observer(getattr(world, "time_manager", None))
    state["fps_enabled"] = toggle_live_fps()


def profile(world: Any, ticks_str: str | None = None, out_path: str | Path = DEFAULT_PROFILE_PATH) -> None:
    """Profile ``ticks_str`` planning calls from the current positions."""
    try:
        num_ticks = int(ticks_str) if ticks_str else 100
    except ValueError:
        logger.error("Invalid number of ticks: %s", ticks_str)
        return
    if num_ticks <= 0:
        logger.info("Number of ticks must be positive.")
        return
    if world.pursuer is None or world.target is None:
        logger.info("Nothing to profile: pursuer or target missing.")
        return

    def _tick() -> None:
        plan_next_step(
            world.grid, world.pursuer, world.target, is_traversable, frontier=_frontier(world)
        )

    try:
        profile_ticks(num_ticks, _tick, out_path)
    except PlannerContractError as exc:
        logger.error("Cannot profile: %s", exc)
        return
    logger.info("Profiled %s planning calls. Output written to %s", num_ticks, out_path)


def help_(state: Dict[str, Any]) -> None:
    logger.info("Commands: %s", ", ".join(f"/{name}" for name in sorted(_COMMANDS)))


_COMMANDS: Dict[str, Callable[[List[str], Any, Dict[str, Any]], None]] = {
    "pause": lambda args, world, state: pause(state),
    "resume": lambda args, world, state: resume(state),
    "step": lambda args, world, state: step(state),
    "quit": lambda args, world, state: quit_(state),
    "wall": lambda args, world, state: wall(world, args),
    "target": lambda args, world, state: _move_actor(world, args, "target"),
    "pursuer": lambda args, world, state: _move_actor(world, args, "pursuer"),
    "plan": lambda args, world, state: plan(world),
    "view": lambda args, world, state: view(world, state),
    "fps": lambda args, world, state: fps(world, state),
    "profile": lambda args, world, state: profile(world, args[0] if args else None),
    "help": lambda args, world, state: help_(state),
}


def execute(command: str, args: List[str], world: Any, state: Dict[str, Any]) -> None:
    """Dispatch ``command`` with ``args`` against ``world``."""

    handler = _COMMANDS.get(command)
    if handler is None:
        logger.info("Unknown command '/%s'. Try /help.", command)
        return
    handler(args, world, state)


__all__ = [
    "execute",
    "pause",
    "resume",
    "step",
    "wall",
    "plan",
    "view",
    "fps",
    "profile",
]
