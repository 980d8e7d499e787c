"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

Configuration settings for zkalgebra. Settings are read from a sectionless
INI file, zkalgebra.conf, in the application data directory. The path can be
overridden with the ZKALGEBRA_CONFIG environment variable.

    wnafwindow = 5
    fixedbasewindow = 4
    loglevel = debug
"""

import logging
import os
import threading

from zkalgebra import AlgebraError
from zkalgebra.util import helpers


APP_NAME = "zkalgebra"
CONFIG_NAME = "zkalgebra.conf"
CONFIG_ENV = "ZKALGEBRA_CONFIG"

DEFAULT_WNAF_WINDOW = 4
DEFAULT_FIXED_BASE_WINDOW = 4

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

log = helpers.getLogger("CONFIG")


def defaultConfigPath():
    """
    The path of the configuration file, honoring the environment override.

    Returns:
        str: The path. The file does not need to exist.
    """
    envPath = os.getenv(CONFIG_ENV)
    if envPath:
        return envPath
    return os.path.join(helpers.appDataDir(APP_NAME), CONFIG_NAME)


def _parseInt(raw, key, low, high):
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        raise AlgebraError(f"config: {key} must be an integer, got {raw!r}")
    try:
        v = int(raw)
    except ValueError:
        raise AlgebraError(f"config: {key} must be an integer, got {raw!r}")
    if v < low or v > high:
        raise AlgebraError(f"config: {key} must be in [{low}, {high}], got {v}")
    return v


class AlgebraConfig:
    """
    AlgebraConfig holds the tunables of the arithmetic engine.

    wnafWindow is the window width used by variable-base scalar
    multiplication. fixedBaseWindow is the window width of precomputed
    FixedBaseTables. logLevel is applied to the package loggers.
    """

    def __init__(
        self,
        wnafWindow=DEFAULT_WNAF_WINDOW,
        fixedBaseWindow=DEFAULT_FIXED_BASE_WINDOW,
        logLevel=logging.INFO,
    ):
        self.wnafWindow = _parseInt(wnafWindow, "wnafwindow", 2, 8)
        self.fixedBaseWindow = _parseInt(fixedBaseWindow, "fixedbasewindow", 1, 8)
        self.logLevel = logLevel

    @staticmethod
    def load(path=None):
        """
        Load the settings file. Missing files and missing keys fall back to
        the defaults.

        Args:
            path (str): optional. The INI file. Defaults to defaultConfigPath.

        Returns:
            AlgebraConfig: The loaded configuration.

        Raises:
            AlgebraError if a value is invalid.
        """
        path = path if path else defaultConfigPath()
        if not os.path.isfile(path):
            log.debug(f"no configuration file at {path}, using defaults")
            return AlgebraConfig()
        raw = helpers.readINI(path, ("wnafwindow", "fixedbasewindow", "loglevel"))
        lvlName = raw.get("loglevel", "info").lower()
        if lvlName not in LOG_LEVELS:
            raise AlgebraError(f"config: unknown loglevel {lvlName!r}")
        cfg = AlgebraConfig(
            wnafWindow=raw.get("wnafwindow", DEFAULT_WNAF_WINDOW),
            fixedBaseWindow=raw.get("fixedbasewindow", DEFAULT_FIXED_BASE_WINDOW),
            logLevel=LOG_LEVELS[lvlName],
        )
        log.debug(f"loaded configuration from {path}")
        return cfg


_cfg = None
_cfgLock = threading.Lock()


def get():
    """
    The process-wide configuration, loaded on first use.

    Returns:
        AlgebraConfig: The settings.
    """
    global _cfg
    with _cfgLock:
        if _cfg is None:
            _cfg = AlgebraConfig.load()
            helpers.setLevels(_cfg.logLevel)
        return _cfg


def set(cfg):
    """
    Replace the process-wide configuration. Passing None makes the next call
    to get reload the settings file.

    Args:
        cfg (AlgebraConfig or None): The new settings.
    """
    global _cfg
    with _cfgLock:
        _cfg = cfg
