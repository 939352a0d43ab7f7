import logging

import yaml

from stepwise_planner import main as app
from stepwise_planner.systems.pursuit_system import PursuitSystem
from stepwise_planner.systems.target_system import TargetSystem
from stepwise_planner.utils.cli.command_parser import CLICommand
from stepwise_planner.utils.cli.terminal_view import get_view


def _write_config(tmp_path, **chase):
    cfg = {
        "world": {"size": [10, 10], "tick_rate": 1000},
        "chase": {"pursuer": [1, 1], "target": [9, 9], **chase},
        "planner": {"frontier": "linear"},
        "gui": {"enabled": False},
        "logging": {"global_level": "WARNING", "module_levels": {"stepwise_planner.main": "nonsense"}},
    }
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.dump(cfg))
    return path


def test_bootstrap_builds_world(tmp_path):
    world = app.bootstrap(_write_config(tmp_path))
    assert world.size == (10, 10)
    assert world.pursuer == (1, 1)
    assert world.target == (9, 9)
    assert world.gui_enabled is False
    systems = list(world.systems_manager)
    assert isinstance(systems[0], TargetSystem)
    assert isinstance(systems[1], PursuitSystem)
    assert systems[1].frontier == "linear"


def test_headless_run_until_caught(tmp_path, monkeypatch):
    world = app.bootstrap(_write_config(tmp_path))
    world.time_manager.sleep_until_next_tick = lambda: None
    monkeypatch.setattr(app, "poll_command", lambda: None)
    get_view().enabled = False

    state = app.run_headless(world, max_ticks=50)

    assert world.caught
    assert world.pursuer == (9, 9)
    assert state["ticks"] == 8
    assert state["events"] == {"pursuer_moved": 8, "caught": 1}


def test_headless_quit_command(tmp_path, monkeypatch):
    world = app.bootstrap(_write_config(tmp_path))
    world.time_manager.sleep_until_next_tick = lambda: None
    commands = [CLICommand("quit", [])]
    monkeypatch.setattr(app, "poll_command", lambda: commands.pop() if commands else None)

    state = app.run_headless(world, max_ticks=50)
    assert state["running"] is False
    assert state["ticks"] == 0
    assert world.pursuer == (1, 1)


def test_headless_respects_max_ticks(tmp_path, monkeypatch):
    world = app.bootstrap(_write_config(tmp_path, stop_when_caught=False))
    world.time_manager.sleep_until_next_tick = lambda: None
    monkeypatch.setattr(app, "poll_command", lambda: None)
    get_view().enabled = False

    state = app.run_headless(world, max_ticks=3)
    assert state["ticks"] == 3
    assert world.pursuer == (4, 4)


def test_configure_logging_warns_on_bad_level(tmp_path, caplog, monkeypatch):
    # basicConfig(force=True) would drop the caplog handler.
    monkeypatch.setattr(app.logging, "basicConfig", lambda **kwargs: None)
    from stepwise_planner.config import load_config

    cfg = load_config(_write_config(tmp_path))
    with caplog.at_level(logging.WARNING):
        app.configure_logging(cfg)
    assert "Invalid log level 'nonsense'" in caplog.text
