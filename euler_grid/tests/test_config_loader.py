import json
import logging

import pytest

from euler_grid.src.utils import config_loader
from euler_grid.src.utils.config_loader import (
    load_config,
    load_meta_config,
    print_runtime_config,
)
from euler_grid.src.utils.logger import get_logger


@pytest.fixture
def restore_log_levels(monkeypatch):
    monkeypatch.setattr(config_loader, "META_CONFIG", {})
    monkeypatch.setattr(config_loader, "LOG_LEVEL", config_loader.LOG_LEVEL)
    loggers = [
        lg
        for name, lg in logging.root.manager.loggerDict.items()
        if name.startswith("euler_grid") and isinstance(lg, logging.Logger)
    ]
    levels = [lg.level for lg in loggers]
    yield
    for lg, level in zip(loggers, levels):
        lg.setLevel(level)


def test_load_yaml(tmp_path):
    path = tmp_path / "conf.yaml"
    path.write_text("log_level: debug\nresource_suffix: .dat\n", encoding="utf-8")
    assert load_config(path) == {"log_level": "debug", "resource_suffix": ".dat"}


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == {}


def test_load_json(tmp_path):
    path = tmp_path / "conf.json"
    path.write_text(json.dumps({"resource_dir": "data"}), encoding="utf-8")
    assert load_config(str(path)) == {"resource_dir": "data"}


def test_unsupported_format(tmp_path):
    path = tmp_path / "conf.ini"
    path.write_text("[x]\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_missing_meta_config(tmp_path):
    assert load_meta_config(tmp_path / "nope.yaml") == {}


def test_bundled_meta_config():
    conf = load_meta_config()
    assert conf["resource_dir"] == "resources"
    assert config_loader.RESOURCE_DIR == config_loader.PACKAGE_ROOT / "resources"
    assert config_loader.RESOURCE_SUFFIX == ".txt"


def test_setters_update_meta_config(tmp_path, monkeypatch, restore_log_levels):
    monkeypatch.setattr(config_loader, "RESOURCE_DIR", config_loader.RESOURCE_DIR)
    monkeypatch.setattr(config_loader, "RESOURCE_SUFFIX", config_loader.RESOURCE_SUFFIX)

    config_loader.set_resource_dir(tmp_path)
    config_loader.set_resource_suffix(".dat")
    config_loader.set_log_level("debug")
    assert config_loader.RESOURCE_DIR == tmp_path
    assert config_loader.RESOURCE_SUFFIX == ".dat"
    assert config_loader.LOG_LEVEL == "DEBUG"
    assert config_loader.META_CONFIG == {
        "resource_dir": str(tmp_path),
        "resource_suffix": ".dat",
        "log_level": "DEBUG",
    }


def test_relative_resource_dir_resolves_against_package(monkeypatch):
    monkeypatch.setattr(config_loader, "META_CONFIG", {})
    monkeypatch.setattr(config_loader, "RESOURCE_DIR", config_loader.RESOURCE_DIR)
    config_loader.set_resource_dir("extra")
    assert config_loader.RESOURCE_DIR == config_loader.PACKAGE_ROOT / "extra"


def test_print_runtime_config(capsys):
    print_runtime_config()
    out = capsys.readouterr().out
    assert "Runtime configuration:" in out
    assert "log_level:" in out
    assert "resource_suffix: .txt" in out


def test_set_log_level_reaches_existing_loggers(restore_log_levels):
    module_logger = logging.getLogger("euler_grid.src.core.grid_utils")
    early = get_logger("euler_grid.tests.early", level="INFO")
    outsider = get_logger("other_package.logger", level="INFO")

    config_loader.set_log_level("debug")
    assert module_logger.level == logging.DEBUG
    assert early.level == logging.DEBUG
    assert outsider.level == logging.INFO
    assert get_logger("euler_grid.tests.late").level == logging.DEBUG
