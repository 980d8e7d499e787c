"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details
"""

import logging
import os

import pytest

from zkalgebra import AlgebraError, config
from zkalgebra.curves import curve  # noqa: F401, registers the CURVE logger
from zkalgebra.util import helpers


def test_defaults():
    cfg = config.AlgebraConfig()
    assert cfg.wnafWindow == config.DEFAULT_WNAF_WINDOW
    assert cfg.fixedBaseWindow == config.DEFAULT_FIXED_BASE_WINDOW
    assert cfg.logLevel == logging.INFO


def test_validation():
    assert config.AlgebraConfig(wnafWindow="6").wnafWindow == 6
    for kwargs in (
        dict(wnafWindow=1),
        dict(wnafWindow=9),
        dict(wnafWindow="five"),
        dict(fixedBaseWindow=0),
        dict(fixedBaseWindow=9),
        # Only ints and strings are accepted, nothing is truncated.
        dict(wnafWindow=4.5),
        dict(wnafWindow=4.0),
        dict(wnafWindow=True),
        dict(fixedBaseWindow=None),
        dict(fixedBaseWindow=[3]),
        dict(fixedBaseWindow="2.5"),
    ):
        with pytest.raises(AlgebraError, match="config"):
            config.AlgebraConfig(**kwargs)


def test_load(tmp_path):
    path = tmp_path / config.CONFIG_NAME

    # A missing file gives the defaults.
    cfg = config.AlgebraConfig.load(str(path))
    assert cfg.wnafWindow == config.DEFAULT_WNAF_WINDOW

    path.write_text("wnafwindow = 5\nfixedbasewindow = 2\nloglevel = DEBUG\n")
    cfg = config.AlgebraConfig.load(str(path))
    assert cfg.wnafWindow == 5
    assert cfg.fixedBaseWindow == 2
    assert cfg.logLevel == logging.DEBUG

    path.write_text("loglevel = chatty\n")
    with pytest.raises(AlgebraError):
        config.AlgebraConfig.load(str(path))

    path.write_text("wnafwindow = 12\n")
    with pytest.raises(AlgebraError):
        config.AlgebraConfig.load(str(path))


def test_configPath(tmp_path, monkeypatch):
    path = tmp_path / "custom.conf"
    monkeypatch.setenv(config.CONFIG_ENV, str(path))
    assert config.defaultConfigPath() == str(path)

    path.write_text("fixedbasewindow = 7\n")
    config.set(None)
    assert config.get().fixedBaseWindow == 7
    # The settings are cached until replaced.
    path.write_text("fixedbasewindow = 3\n")
    assert config.get().fixedBaseWindow == 7

    monkeypatch.delenv(config.CONFIG_ENV)
    defaultPath = config.defaultConfigPath()
    assert os.path.basename(defaultPath) == config.CONFIG_NAME


def test_set():
    cfg = config.AlgebraConfig(wnafWindow=3)
    config.set(cfg)
    assert config.get() is cfg


def test_logLevel(tmp_path, monkeypatch):
    path = tmp_path / config.CONFIG_NAME
    path.write_text("loglevel = debug\n")
    monkeypatch.setenv(config.CONFIG_ENV, str(path))
    config.set(None)
    try:
        assert config.get().logLevel == logging.DEBUG
        # Loggers created at import time pick up the configured level.
        assert helpers.LogSettings.loggers["CURVE"].level == logging.DEBUG
    finally:
        helpers.setLevels(logging.INFO)
