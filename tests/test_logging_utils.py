import json

import delve.logging_utils as lu
from delve import EntityRegistry, LevelConfig, make_level, new_player


def test_key_value_format(monkeypatch, capsys):
    monkeypatch.setattr(lu, "CURRENT_LEVEL", lu.LEVELS["info"])
    monkeypatch.setattr(lu, "JSON_MODE", False)
    lu.get_logger("delve.test").info(event="x", depth=3, name="healing potion", skipped=None)
    out = capsys.readouterr().out.strip()
    assert out.startswith("level=info ts=")
    assert "event=x" in out
    assert "depth=3" in out
    assert "name=healing_potion" in out
    assert "logger=delve.test" in out
    assert "skipped" not in out


def test_threshold_and_stderr(monkeypatch, capsys):
    monkeypatch.setattr(lu, "CURRENT_LEVEL", lu.LEVELS["info"])
    monkeypatch.setattr(lu, "JSON_MODE", False)
    log = lu.get_logger("delve.test")
    log.debug(event="hidden")
    log.error(event="boom")
    captured = capsys.readouterr()
    assert "hidden" not in captured.out
    assert "event=boom" in captured.err


def test_json_mode(monkeypatch, capsys):
    monkeypatch.setattr(lu, "CURRENT_LEVEL", lu.LEVELS["debug"])
    monkeypatch.setattr(lu, "JSON_MODE", True)
    lu.get_logger("delve.test").warn(event="y", rooms=4)
    rec = json.loads(capsys.readouterr().out.strip())
    assert rec["level"] == "warn"
    assert rec["event"] == "y"
    assert rec["rooms"] == 4


def test_logger_cache():
    assert lu.get_logger("delve.a") is lu.get_logger("delve.a")


def test_generation_emits_event(monkeypatch, capsys):
    monkeypatch.setattr(lu, "CURRENT_LEVEL", lu.LEVELS["info"])
    monkeypatch.setattr(lu, "JSON_MODE", False)
    make_level(EntityRegistry(new_player()), 2, LevelConfig(seed=6))
    out = capsys.readouterr().out
    assert "event=level_generated" in out
    assert "depth=2" in out


def test_bound_fields_follow_every_record(monkeypatch, capsys):
    monkeypatch.setattr(lu, "CURRENT_LEVEL", lu.LEVELS["info"])
    monkeypatch.setattr(lu, "JSON_MODE", True)
    base = lu.get_logger("delve.test")
    log = base.bind(depth=3, seed=42)
    log.info(event="room_accepted")
    log.info(event="override", depth=9)
    base.info(event="unbound")
    first, second, third = (json.loads(line) for line in capsys.readouterr().out.strip().splitlines())
    assert (first["depth"], first["seed"], first["logger"]) == (3, 42, "delve.test")
    assert second["depth"] == 9
    assert "depth" not in third
    assert base.context == {}


def test_generation_records_carry_seed(monkeypatch, capsys):
    monkeypatch.setattr(lu, "CURRENT_LEVEL", lu.LEVELS["info"])
    monkeypatch.setattr(lu, "JSON_MODE", False)
    make_level(EntityRegistry(new_player()), 1, LevelConfig(seed=31))
    assert "seed=31" in capsys.readouterr().out
