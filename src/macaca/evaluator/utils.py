# src/macaca/evaluator/utils.py
import logging

from ..object import EvaluationError, ReturnValue, Boolean, Null, NULL, TRUE, FALSE
from ..config import config as macaca_config

logger = logging.getLogger("macaca.evaluator")

_LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}

__all__ = [
    "NULL", "TRUE", "FALSE", "is_error", "is_signal", "is_truthy",
    "new_summary", "debug_log",
]


def is_error(obj):
    return isinstance(obj, EvaluationError)


def is_signal(obj):
    """True for the control-flow carriers that must stop a statement sequence."""
    return isinstance(obj, (ReturnValue, EvaluationError))


def is_truthy(obj):
    # only false and null are falsy; 0, "" and [] are truthy
    if isinstance(obj, Null):
        return False
    if isinstance(obj, Boolean):
        return bool(obj.value)
    return True


def new_summary():
    """Per-session counters, reported by ``macaca run --stats``."""
    return {
        'steps': 0,
        'evaluated_statements': 0,
        'function_calls': 0,
        'builtin_calls': 0,
        'max_call_depth': 0,
        'errors': 0,
    }


def debug_log(message, data=None, level='debug', enabled=None):
    """Conditional debug logging that respects the user's persistent config.

    ``enabled`` overrides the config gate for a single session.
    """
    if enabled is None:
        enabled = macaca_config.should_log(level)
    if not enabled:
        return
    log_level = _LOG_LEVELS.get(level, logging.DEBUG)
    if data is not None:
        logger.log(log_level, "%s: %s", message, data)
    else:
        logger.log(log_level, "%s", message)
