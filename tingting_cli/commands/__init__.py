"""
CLI command modules for TingTing CLI.

Each module exposes a ``register_*_commands`` function that attaches its
commands to the main CLI group.
"""

import sys
import logging
from typing import Any, Callable, Dict, Optional

import click

from ..api import TingTingClient
from ..config import ClientConfig
from ..exceptions import ApiError, TingTingError
from ..utils import (
    print_error,
    print_info,
    print_json,
    parse_filters,
    parse_payload,
)

logger = logging.getLogger(__name__)


class TingTingContext:
    """CLI context object for sharing state between commands."""

    def __init__(self):
        self.config: ClientConfig = None  # type: ignore[assignment]
        self.verbose: bool = False
        self.quiet: bool = False

    def create_client(self) -> TingTingClient:
        """Create an API client for the resolved configuration."""
        return TingTingClient(self.config)


pass_context = click.make_pass_decorator(TingTingContext, ensure=True)


def _payload_callback(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Any:
    if value is None:
        return None
    try:
        return parse_payload(value)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)


def _filters_callback(ctx: click.Context, param: click.Parameter, value: tuple) -> Dict[str, str]:
    try:
        return parse_filters(list(value))
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)


def payload_option(required: bool = True):
    """Option for a JSON request body, inline or ``@file.json``."""
    return click.option(
        '--data', '-d', 'payload',
        required=required,
        callback=_payload_callback,
        help='JSON body, inline or @path/to/file.json'
    )


def filter_option(f):
    """Option for repeated ``key=value`` query filters."""
    return click.option(
        '--filter', '-F', 'filters',
        multiple=True,
        callback=_filters_callback,
        help='Query filter as key=value (repeatable)'
    )(f)


def execute(ctx: TingTingContext, operation: Callable[[TingTingClient], Any]) -> Any:
    """
    Run one API operation and print its JSON result.

    Exits with status 1 on any TingTing error.
    """
    try:
        with ctx.create_client() as client:
            result = operation(client)
    except ApiError as e:
        details = f"HTTP {e.code}" if e.code else None
        if e.raw_data is not None and not ctx.quiet:
            details = f"{details or 'Response'}: {e.raw_data}"
        print_error(f"API request failed: {e.message}", details)
        sys.exit(1)
    except TingTingError as e:
        print_error(str(e))
        sys.exit(1)

    print_json(result)
    return result


__all__ = [
    "TingTingContext",
    "pass_context",
    "payload_option",
    "filter_option",
    "execute",
    "print_error",
    "print_info",
    "print_json",
]
