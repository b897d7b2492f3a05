#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Logging for release runs.

A RelnotesLogger owns two stdlib loggers per component:

    relnotes.<component>          → <log_dir>/<component>.log  (DEBUG+)
                                  → stderr                     (WARNING+)
    relnotes.<component>.errors   → <log_dir>/errors.log       (ERROR+)

Both files rotate. Structured details are appended to each record as JSON,
so one line of the operations log reads e.g.

    ... - INFO - [check_stage:98] - OPERATION - check_stage_start: {"cwd": "."}

Library code takes ``logger: Optional[RelnotesLogger] = None`` and calls
``safe_logger(logger).log_*`` so it runs the same with or without logging.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

# --- Third party imports ---
import click


FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ERRORS_LOG = "errors.log"


def format_cli_error(error: Exception) -> str:
    """One-line message shown to CLI users for a failed command."""
    return f"❌ {type(error).__name__}: {error}"


def _with_details(message: str, details: Optional[Mapping[str, Any]]) -> str:
    if not details:
        return message
    return f"{message}: {json.dumps(dict(details), default=str)}"


class RelnotesLogger:
    """
    Rotating file logger for one relnotes component.

    Attributes:
        log_dir: Directory holding the log files
        component_name: Component suffix of the logger names
        main_logger: Operations logger (file + console)
        error_logger: Errors-only logger (errors.log)
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "relnotes",
        max_bytes: int = 2 * 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files (created if missing)
            component_name: Component identifier, e.g. 'release'
            max_bytes: Size at which a log file rotates (default: 2MB)
            backup_count: Rotated files kept per log (default: 3)
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self.log_dir.mkdir(parents=True, exist_ok=True)
        base_name = f"relnotes.{component_name}"

        self.main_logger = self._fresh_logger(base_name, logging.DEBUG)
        self.main_logger.addHandler(
            self._rotating_handler(self.log_dir / f"{component_name}.log", logging.DEBUG)
        )
        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        self.main_logger.addHandler(console)

        self.error_logger = self._fresh_logger(f"{base_name}.errors", logging.ERROR)
        self.error_logger.addHandler(
            self._rotating_handler(self.log_dir / ERRORS_LOG, logging.ERROR)
        )

    # ---- Setup ----
    @staticmethod
    def _fresh_logger(name: str, level: int) -> logging.Logger:
        """Get a named logger stripped of handlers left by an earlier instance."""
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(level)
        logger.propagate = False
        return logger

    def _rotating_handler(self, path: Path, level: int) -> RotatingFileHandler:
        handler = RotatingFileHandler(
            path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        return handler

    def close(self) -> None:
        """Close and detach all handlers (releases the log files)."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    # ---- Records ----
    def _emit(self, level: int, tag: str, message: str, details: Optional[Mapping[str, Any]]) -> None:
        # stacklevel 3 attributes the record to the caller of log_*
        self.main_logger.log(level, _with_details(f"{tag} - {message}", details), stacklevel=3)

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        """
        Record a stage milestone.

        Args:
            operation: Milestone name, e.g. 'edit_stage_complete'
            details: Values describing the milestone (JSON-encoded)
        """
        self._emit(logging.INFO, "OPERATION", operation, details or {})

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.DEBUG, "DEBUG", message, details)

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.INFO, "INFO", message, details)

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Warnings also reach the console."""
        self._emit(logging.WARNING, "WARNING", message, details)

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Write an exception to errors.log.

        The record holds the exception type and message, the context as
        key=value pairs, and the traceback when one is being handled.
        """
        lines = [f"ERROR - {type(error).__name__}: {error}"]
        if context:
            lines.append("Context: " + ", ".join(f"{k}={v}" for k, v in context.items()))
        if sys.exc_info()[0] is not None:
            lines.append("Traceback:\n" + traceback.format_exc().rstrip())
        self.error_logger.error("\n".join(lines))

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log a command failure and return the message to print.

        Args:
            error: Exception that ended the command
            context: Where it happened (defaults to {'source': 'cli'})
            show_traceback: Append the traceback to the returned message

        Examples:
            >>> logger.log_cli_error(ReleaseError("No CHANGELOG.md found"))
            '❌ ReleaseError: No CHANGELOG.md found'
        """
        self.log_error(error, context or {"source": "cli"})
        message = format_cli_error(error)
        if show_traceback and sys.exc_info()[0] is not None:
            message = f"{message}\n\n{traceback.format_exc()}"
        return message


class NullLogger(RelnotesLogger):
    """RelnotesLogger that records nothing and opens no files."""

    def __init__(self) -> None:
        pass

    def close(self) -> None:
        pass

    def _emit(self, level, tag, message, details) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass


_null_logger = NullLogger()


def safe_logger(logger: Optional[RelnotesLogger]) -> RelnotesLogger:
    """Return `logger`, or the shared NullLogger when it is None."""
    return logger if logger is not None else _null_logger


def handle_cli_error(
    ctx: click.Context,
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed command and exit.

    The logger and verbose flag come from ``ctx.obj`` as set up by the
    command group. Details go to errors.log; the user sees one line on
    stderr (plus the traceback with --verbose).

    Args:
        ctx: Click context of the failing command
        error: Exception that ended the command
        operation: Command name, e.g. 'release'
        additional_context: Extra values for the log (cwd, version, ...)
        exit_code: Process exit code (default: 1)

    Note:
        Never returns; always calls sys.exit().
    """
    obj = ctx.obj or {}
    context = {"operation": operation, **(additional_context or {})}
    message = safe_logger(obj.get("logger")).log_cli_error(
        error, context, show_traceback=obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)
