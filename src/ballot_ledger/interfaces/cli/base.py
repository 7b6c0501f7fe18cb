"""Shared helpers for CLI commands."""

import asyncio
import functools
import sys

from collections.abc import Callable, Coroutine
from typing import Any, Protocol, TypeVar

import click

from ballot_ledger.common.logging import get_logger


logger = get_logger(__name__)

T = TypeVar("T")


class FailableResult(Protocol):
    success: bool
    error_code: str | None
    error_message: str | None


class BaseCommand:
    """Output helpers shared by command implementations."""

    @staticmethod
    def show_progress(message: str) -> None:
        click.echo(message)

    @staticmethod
    def success(message: str) -> None:
        click.echo(click.style(f"✓ {message}", fg="green"))

    @staticmethod
    def warning(message: str) -> None:
        click.echo(click.style(f"⚠ {message}", fg="yellow"))

    @staticmethod
    def error(message: str, exit_code: int = 1) -> None:
        click.echo(click.style(f"✗ {message}", fg="red"), err=True)
        sys.exit(exit_code)

    @staticmethod
    def fail_if_unsuccessful(result: FailableResult) -> None:
        """Exit with status 1 when a use case reports failure."""
        if not result.success:
            BaseCommand.error(f"{result.error_code}: {result.error_message}")


def with_error_handling(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn unexpected exceptions into a red error line and exit status 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit, SystemExit):
            raise
        except Exception as e:
            logger.exception(f"Command {func.__name__} failed")
            click.echo(click.style(f"✗ Error: {e}", fg="red"), err=True)
            sys.exit(1)

    return wrapper


def get_or_init_container() -> Any:
    from ballot_ledger.infrastructure.di import container as di

    try:
        return di.get_container()
    except RuntimeError:
        return di.init_container()


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    return asyncio.run(coro)
