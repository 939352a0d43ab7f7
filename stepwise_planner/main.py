# stepwise_planner/main.py
"""World bootstrap and tick loop for the chase demo."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict
import logging
import sys
import time

from .config import CONFIG, CONFIG_PATH, Config, load_config
from .core.systems_manager import SystemsManager
from .core.time_manager import TimeManager
from .core.world import ChaseWorld
from .scenarios.chase_scenario import ChaseScenario
from .systems.pursuit_system import PursuitSystem
from .systems.target_system import TargetSystem
from .utils.cli.command_parser import poll_command, start_cli_thread, stop_cli_thread
from .utils.cli.commands import execute
from .utils.cli.terminal_view import get_view
from .utils.observer import summarize_events

logger = logging.getLogger(__name__)


def configure_logging(cfg: Config = CONFIG) -> None:
    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )
    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path = CONFIG_PATH) -> ChaseWorld:
    """Build a world from ``config_path`` with systems registered and actors placed."""

    cfg = load_config(Path(config_path))

    world = ChaseWorld(cfg.world.size)
    world.time_manager = TimeManager(cfg.world.tick_rate)
    world.gui_enabled = cfg.gui.enabled
    world.config = cfg

    world.systems_manager = SystemsManager()
    world.systems_manager.register(PursuitSystem(world, frontier=cfg.planner.frontier))
    world.systems_manager.register(
        TargetSystem(world, wanders=cfg.chase.target_wanders, seed=cfg.chase.wander_seed)
    )

    ChaseScenario(pursuer=cfg.chase.pursuer, target=cfg.chase.target).setup(world)
    logger.info(
        "[Bootstrap] %sx%s world, %s ticks/s, %s frontier",
        cfg.world.size[0], cfg.world.size[1], cfg.world.tick_rate, cfg.planner.frontier,
    )
    return world


def run_headless(world: ChaseWorld, max_ticks: int | None = None) -> Dict[str, Any]:
    """Tick ``world`` without a window until caught, quit or ``max_ticks``."""

    tm = world.time_manager
    stop_when_caught = world.config.chase.stop_when_caught if world.config else True
    state: Dict[str, Any] = {"paused": False, "step": False, "running": True, "fps_enabled": False}
    view = get_view()
    ticks = 0

    while state["running"]:
        cmd = poll_command()
        if cmd:
            execute(cmd.name, cmd.args, world, state)
            if not state["running"]:
                break

        if state["paused"] and not state["step"]:
            time.sleep(0.016)
            continue
        state["step"] = False

        world.systems_manager.update(world, tm.tick_counter)
        view.render(world)
        ticks += 1
        if world.caught and stop_when_caught:
            logger.info("Target caught after %s tick(s).", ticks)
            break
        if max_ticks is not None and ticks >= max_ticks:
            break
        tm.sleep_until_next_tick()

    state["ticks"] = ticks
    state["events"] = summarize_events(world.event_log)
    logger.info("Chase ended after %s tick(s): %s", ticks, state["events"])
    return state


def run_gui(world: ChaseWorld) -> None:
    """Run the pygame window until it is closed."""

    import pygame

    from .gui import input as gui_input
    from .gui.renderer import Renderer
    from .gui.window import Window

    window_size = world.config.gui.window_size if world.config else (600, 600)
    renderer = Renderer(Window(window_size))
    tm = world.time_manager
    state: Dict[str, Any] = {"paused": False, "step": False, "running": True, "fps_enabled": False}
    clock = pygame.time.Clock()

    try:
        while state["running"]:
            gui_input.handle_events(world, renderer, state)
            cmd = poll_command()
            if cmd:
                execute(cmd.name, cmd.args, world, state)
            if not state["running"]:
                break

            renderer.update(world)

            if world.caught and (world.config is None or world.config.chase.stop_when_caught):
                clock.tick(60)
                continue
            if state["step"] or (not state["paused"] and tm.tick_due()):
                state["step"] = False
                world.systems_manager.update(world, tm.tick_counter)

            clock.tick(60)
    finally:
        if pygame.get_init():
            pygame.quit()


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    config_path = Path(args[0]) if args else CONFIG_PATH
    configure_logging(load_config(config_path))

    world = bootstrap(config_path)
    cli_input_thread = start_cli_thread()
    logger.info("Application started. Type /help for commands.")
    try:
        if world.gui_enabled:
            run_gui(world)
        else:
            get_view().enabled = True
            run_headless(world)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    finally:
        stop_cli_thread()
        if cli_input_thread.is_alive():
            cli_input_thread.join(timeout=0.1)


if __name__ == "__main__":
    main()
