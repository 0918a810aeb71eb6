"""Shared Click option decorators for the xdgdir CLI."""

import functools
import os

import click

FORMATS = ["text", "json", "table"]


def format_option():
    """Add --format option (text|json|table)."""

    def decorator(f):
        return click.option(
            "--format",
            "format",
            type=click.Choice(FORMATS, case_sensitive=False),
            default="text",
            help="Output format (text|json|table).",
        )(f)

    return decorator


def _swap_env(name: str, value: str):
    """Set ``name`` and return a callable restoring its previous state."""
    previous = os.environ.get(name)
    os.environ[name] = value

    def restore() -> None:
        if previous is None:
            os.environ.pop(name, None)
        else:
            os.environ[name] = previous

    return restore


def with_log_silence():
    """Silence log events unless --verbose is passed or XDGDIR_DEBUG=1.

    --verbose also turns on debug events for the duration of the command.
    """

    def decorator(f):
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            restorers = []
            if kwargs.get("verbose", False):
                restorers.append(_swap_env("XDGDIR_DEBUG", "1"))
            elif os.environ.get("XDGDIR_DEBUG") != "1" and os.environ.get("XDGDIR_LOG_SILENT") != "1":
                restorers.append(_swap_env("XDGDIR_LOG_SILENT", "1"))
            try:
                return f(*args, **kwargs)
            finally:
                for restore in reversed(restorers):
                    restore()

        return wrapper

    return decorator


def verbose_option():
    def decorator(f):
        return click.option(
            "--verbose",
            is_flag=True,
            default=False,
            help="Log resolution events to stderr.",
        )(f)

    return decorator


def output_options():
    """Composite decorator applying --format, --verbose and log silencing.

    Usage::

        @click.command()
        @output_options()
        def my_command(format, verbose, ...):
            ...
    """

    def decorator(f):
        f = with_log_silence()(f)
        f = format_option()(f)
        f = verbose_option()(f)
        return f

    return decorator
