import json
import logging

import pytest
from pydantic import ValidationError

from klondike.rules_schema import HISTORY_LIMIT_ENV, GameConfig, load_config


def test_defaults():
    config = GameConfig()
    assert config.history_limit == 10
    assert config.seed is None
    assert config.numeric_log_level() == logging.WARNING


def test_validation():
    with pytest.raises(ValidationError):
        GameConfig(history_limit=0)
    with pytest.raises(ValidationError):
        GameConfig(log_level="chatty")
    assert GameConfig(log_level="debug").log_level == "DEBUG"


def test_load_config_from_file_and_env(tmp_path, monkeypatch):
    path = tmp_path / "klondike.json"
    path.write_text(json.dumps({"seed": 9, "history_limit": 4}), encoding="utf-8")
    monkeypatch.delenv(HISTORY_LIMIT_ENV, raising=False)

    config = load_config(path)
    assert config.seed == 9
    assert config.history_limit == 4

    monkeypatch.setenv(HISTORY_LIMIT_ENV, "7")
    assert load_config(path).history_limit == 7
    assert load_config().history_limit == 7
