"""Simple configuration loader for stepwise_planner."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class WorldConfig:
    """Configuration values for the world section."""

    size: tuple[int, int] = (10, 10)
    tick_rate: float = 2.0


@dataclass
class ChaseConfig:
    """Start positions and behaviour of the chase demo."""

    pursuer: tuple[int, int] = (1, 1)
    target: tuple[int, int] = (9, 9)
    target_wanders: bool = False
    wander_seed: int | None = 12345
    stop_when_caught: bool = True


@dataclass
class PlannerConfig:
    """Search tuning."""

    frontier: str = "heap"


@dataclass
class GuiConfig:
    enabled: bool = True
    window_size: tuple[int, int] = (600, 600)


@dataclass
class LoggingConfig:
    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    world: WorldConfig = field(default_factory=WorldConfig)
    chase: ChaseConfig = field(default_factory=ChaseConfig)
    planner: PlannerConfig = field(default_factory=PlannerConfig)
    gui: GuiConfig = field(default_factory=GuiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _pair(value: Any, default: tuple[int, int]) -> tuple[int, int]:
    if isinstance(value, (list, tuple)) and len(value) >= 2:
        return int(value[0]), int(value[1])
    return default


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    world_data = data.get("world") or {}
    world = WorldConfig(
        size=_pair(world_data.get("size"), (10, 10)),
        tick_rate=float(world_data.get("tick_rate", 2.0)),
    )

    chase_data = data.get("chase") or {}
    seed = chase_data.get("wander_seed", 12345)
    chase = ChaseConfig(
        pursuer=_pair(chase_data.get("pursuer"), (1, 1)),
        target=_pair(chase_data.get("target"), (9, 9)),
        target_wanders=bool(chase_data.get("target_wanders", False)),
        wander_seed=int(seed) if seed is not None else None,
        stop_when_caught=bool(chase_data.get("stop_when_caught", True)),
    )

    planner_data = data.get("planner") or {}
    planner = PlannerConfig(frontier=str(planner_data.get("frontier", "heap")).lower())

    gui_data = data.get("gui") or {}
    gui = GuiConfig(
        enabled=bool(gui_data.get("enabled", True)),
        window_size=_pair(gui_data.get("window_size"), (600, 600)),
    )

    logging_data = data.get("logging") or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(world=world, chase=chase, planner=planner, gui=gui, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        raw = {}
    if not isinstance(raw, dict):
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "WorldConfig",
    "ChaseConfig",
    "PlannerConfig",
    "GuiConfig",
    "LoggingConfig",
    "load_config",
]
