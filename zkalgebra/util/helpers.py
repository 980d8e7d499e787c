"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

Logging and platform helpers shared by the arithmetic modules.
"""

import configparser
import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
import platform
import sys
from typing import Dict, Iterable, Optional, Union

from appdirs import AppDirs  # type: ignore


LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 2


class LogSettings:
    """
    Process-wide logging state. Every logger handed out by getLogger is a
    child of root and is remembered, so that prepareLogging and setLevels can
    adjust loggers that modules created at import time.
    """

    root = logging.getLogger("zkalgebra")
    defaultLevel = logging.INFO
    moduleLevels: Dict[str, int] = {}
    loggers: Dict[str, Logger] = {}
    handlers: Dict[str, logging.Handler] = {}


LogSettings.root.setLevel(logging.NOTSET)


def _levelFor(name: str) -> int:
    return LogSettings.moduleLevels.get(name, LogSettings.defaultLevel)


def setLevels(logLvl: int, lvlMap: Optional[Dict[str, int]] = None) -> None:
    """
    Set the default level and any per-module overrides, and apply them to
    every logger created so far.

    Args:
        logLvl: The level of loggers without an entry in lvlMap.
        lvlMap: Module name to level overrides, merged into the stored ones.
    """
    LogSettings.defaultLevel = logLvl
    if lvlMap:
        LogSettings.moduleLevels.update(lvlMap)
    for name, logger in LogSettings.loggers.items():
        logger.setLevel(_levelFor(name))


def _swapHandler(key: str, handler: Optional[logging.Handler]) -> None:
    old = LogSettings.handlers.pop(key, None)
    if old is not None:
        LogSettings.root.removeHandler(old)
        old.close()
    if handler is None:
        return
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    LogSettings.root.addHandler(handler)
    LogSettings.handlers[key] = handler


def prepareLogging(
    filepath: Union[Path, str, None] = None,
    logLvl: int = logging.INFO,
    lvlMap: Optional[Dict[str, int]] = None,
) -> None:
    """
    Send the package logs to stdout, and also to a rotating log file if
    filepath is provided. Handlers installed by an earlier call are closed
    and replaced.

    Args:
        filepath: The base name for the rotating log file.
        logLvl: The default logging level, see setLevels.
        lvlMap: Per-module level overrides, see setLevels.
    """
    setLevels(logLvl, lvlMap)
    fileHandler = None
    if filepath:
        fileHandler = RotatingFileHandler(
            filepath, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS
        )
    _swapHandler("file", fileHandler)
    # pythonw on Windows has no stdout to write to.
    stdoutHandler = None
    if not sys.executable.endswith("pythonw.exe"):
        stdoutHandler = logging.StreamHandler()
    _swapHandler("stdout", stdoutHandler)


def getLogger(name: str) -> Logger:
    """
    Gets a named child of the package logger, with the level registered for
    the name or the default level.

    Args:
        name: The logger name, e.g. "CURVE".
    """
    l = LogSettings.root.getChild(name)
    l.setLevel(_levelFor(name))
    LogSettings.loggers[name] = l
    return l


def readINI(path: Union[Path, str], keys: Iterable[str]) -> Dict[str, str]:
    """
    Read the wanted keys from an INI file. Section headers are optional and
    every section is searched. Keys that are not found are left out of the
    result.

    Args:
        path: The path to the INI file.
        keys: The keys to look for.

    Returns:
        The keys found and their raw string values.
    """
    parser = configparser.ConfigParser(strict=False)
    with open(path) as f:
        parser.read_string(f"[{LogSettings.root.name}]\n" + f.read())
    wanted = set(keys)
    return {
        k: v
        for section in parser.sections()
        for k, v in parser[section].items()
        if k in wanted
    }


def appDataDir(appName: str) -> str:
    """
    The operating system specific directory for an application's data.
    Windows uses the appdirs user data directory, macOS uses
    ~/Library/Application Support/Appname and everything else uses
    ~/.appname. A leading period in appName is ignored.

    Args:
        appName: The application name.

    Returns:
        The directory path, or "." when there is no name or no home directory.
    """
    appName = appName.lstrip(".")
    if not appName:
        return "."
    if platform.system() == "Windows":
        return AppDirs(appName.capitalize(), "").user_data_dir
    home = os.path.expanduser("~") or os.getenv("HOME", "")
    if not home:
        return "."
    if platform.system() == "Darwin":
        return os.path.join(home, "Library", "Application Support", appName.capitalize())
    return os.path.join(home, "." + appName.lower())
