"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the verbosity of the
Processor currently running, without passing it through every call.

Sinks belong to the host application: importing this package leaves the
loguru handlers alone. Call logger_attachStderr() to get the compact
stderr format explicitly.

Usage:
    from directive_mdx.lib.log import LOG, state_connectToLogger, state_disconnectFromLogger

    # Around a run:
    token = state_connectToLogger(processor)
    try:
        LOG("Pass summaries appear if verbosity >= 2", level=2)
        LOG("Per-node trace appears if verbosity >= 3", level=3)
    finally:
        state_disconnectFromLogger(token)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar, Token
import sys

# Context variable to hold the current run state (anything with .verbosity)
_run_state: ContextVar[Optional[Any]] = ContextVar('run_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

_stderr_handler: Optional[int] = None


def logger_attachStderr(level: str = "DEBUG") -> int:
    """
    Add a stderr sink using the package's log format.

    Only one such sink is added however often this is called; other
    sinks are left in place.

    Returns:
        The loguru handler id of the sink
    """
    global _stderr_handler
    if _stderr_handler is None:
        _stderr_handler = logger.add(sys.stderr, format=logger_format, level=level)
    return _stderr_handler


def state_connectToLogger(state: Any) -> Token:
    """
    Connect a run state to the logging context.

    Args:
        state: Object with a ``verbosity`` attribute (e.g. a Processor)

    Returns:
        Token for state_disconnectFromLogger()
    """
    return _run_state.set(state)


def state_disconnectFromLogger(token: Token) -> None:
    """Restore the run state that was connected before ``token`` was issued"""
    _run_state.reset(token)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru metadata

    Nothing is emitted when no state is connected.
    """
    state = _run_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)
