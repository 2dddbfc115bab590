# src/macaca/config.py
"""
Persistent configuration for the Macaca interpreter.

Values are resolved in order: built-in defaults, the JSON file at
``~/.macaca/config.json`` (or ``$MACACA_CONFIG``), then environment
variables. Command line flags override the result for one run.

Environment variables::

    MACACA_DEBUG=1          enable evaluator debug logging
    MACACA_LOG_LEVEL=INFO   level used by the CLI log handler
    MACACA_MAX_STEPS=5000   evaluation step budget (0 = unlimited)
    MACACA_RECURSION_LIMIT  host recursion limit raised for each evaluation
"""

import json
import logging
import os
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger("macaca.config")

DEFAULT_CONFIG_PATH = Path.home() / ".macaca" / "config.json"

# enough host frames for a few hundred nested Macaca calls
DEFAULT_RECURSION_LIMIT = 10000

_LEVELS = {"debug": 10, "info": 20, "warning": 30, "error": 40}

_TRUTHY = {"1", "true", "yes", "on"}


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def _parse_steps(value) -> Optional[int]:
    steps = int(value)
    return steps if steps > 0 else None


class MacacaConfig:
    def __init__(self, enable_debug_logs: bool = False, log_level: str = "WARNING",
                 max_steps: Optional[int] = None,
                 recursion_limit: Optional[int] = DEFAULT_RECURSION_LIMIT,
                 path: Optional[Path] = None):
        self.enable_debug_logs = enable_debug_logs
        self.log_level = log_level.upper()
        self.max_steps = max_steps
        self.recursion_limit = recursion_limit
        self.path = path

    @classmethod
    def load(cls, path=None, environ: Optional[Mapping[str, str]] = None) -> "MacacaConfig":
        environ = os.environ if environ is None else environ
        if path is None:
            path = environ.get("MACACA_CONFIG") or DEFAULT_CONFIG_PATH
        path = Path(path)

        cfg = cls(path=path)
        if path.is_file():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                logger.warning("Ignoring unreadable config file %s: %s", path, e)
            else:
                cfg.update(data)

        if "MACACA_DEBUG" in environ:
            cfg.enable_debug_logs = _parse_bool(environ["MACACA_DEBUG"])
        if "MACACA_LOG_LEVEL" in environ:
            cfg.log_level = environ["MACACA_LOG_LEVEL"].upper()
        if "MACACA_MAX_STEPS" in environ:
            try:
                cfg.max_steps = _parse_steps(environ["MACACA_MAX_STEPS"])
            except ValueError:
                logger.warning("Ignoring MACACA_MAX_STEPS=%r: not an integer", environ["MACACA_MAX_STEPS"])
        if "MACACA_RECURSION_LIMIT" in environ:
            try:
                cfg.recursion_limit = _parse_steps(environ["MACACA_RECURSION_LIMIT"])
            except ValueError:
                logger.warning("Ignoring MACACA_RECURSION_LIMIT=%r: not an integer",
                               environ["MACACA_RECURSION_LIMIT"])
        return cfg

    def update(self, data: Mapping):
        if "enable_debug_logs" in data:
            self.enable_debug_logs = _parse_bool(data["enable_debug_logs"])
        if "log_level" in data:
            self.log_level = str(data["log_level"]).upper()
        if "max_steps" in data:
            value = data["max_steps"]
            self.max_steps = None if value is None else _parse_steps(value)
        if "recursion_limit" in data:
            value = data["recursion_limit"]
            self.recursion_limit = None if value is None else _parse_steps(value)

    def should_log(self, level: str = "debug") -> bool:
        """Debug output is opt-in; everything above debug follows log_level."""
        if level == "debug":
            return self.enable_debug_logs
        threshold = _LEVELS.get(self.log_level.lower(), _LEVELS["warning"])
        return _LEVELS.get(level, _LEVELS["debug"]) >= threshold

    def as_dict(self) -> dict:
        return {
            "enable_debug_logs": self.enable_debug_logs,
            "log_level": self.log_level,
            "max_steps": self.max_steps,
            "recursion_limit": self.recursion_limit,
        }

    def save(self, path=None) -> Path:
        target = Path(path or self.path or DEFAULT_CONFIG_PATH)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(self.as_dict(), indent=2), encoding="utf-8")
        return target

    def __repr__(self):
        return f"MacacaConfig({self.as_dict()})"


config = MacacaConfig.load()
