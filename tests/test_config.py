import yaml

from stepwise_planner.config import Config, load_config


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert isinstance(cfg, Config)
    assert cfg.world.size == (10, 10)
    assert cfg.chase.pursuer == (1, 1)
    assert cfg.chase.target == (9, 9)
    assert cfg.planner.frontier == "heap"
    assert cfg.logging.global_level == "INFO"


def test_values_are_parsed(tmp_path):
    raw = {
        "world": {"size": [20, 12], "tick_rate": 5},
        "chase": {"pursuer": [0, 0], "target": [19, 11], "target_wanders": True, "wander_seed": None},
        "planner": {"frontier": "LINEAR"},
        "gui": {"enabled": False, "window_size": [400, 240]},
        "logging": {"global_level": "debug", "module_levels": {"stepwise_planner": "WARNING"}},
    }
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.dump(raw))

    cfg = load_config(path)
    assert cfg.world.size == (20, 12)
    assert cfg.world.tick_rate == 5.0
    assert cfg.chase.target == (19, 11)
    assert cfg.chase.target_wanders is True
    assert cfg.chase.wander_seed is None
    assert cfg.planner.frontier == "linear"
    assert cfg.gui.enabled is False
    assert cfg.gui.window_size == (400, 240)
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"stepwise_planner": "WARNING"}


def test_empty_or_odd_file(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("")
    assert load_config(path).world.size == (10, 10)
    path.write_text("- just\n- a list\n")
    assert load_config(path).planner.frontier == "heap"
