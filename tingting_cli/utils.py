"""
Utility functions for TingTing CLI.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import click


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the CLI.

    Args:
        verbose: Enable debug logging
        quiet: Only log errors
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # urllib3 connection chatter is only useful with -v
    logging.getLogger("urllib3").setLevel(logging.DEBUG if verbose else logging.WARNING)


def print_error(message: str, details: Optional[str] = None) -> None:
    """Print error message with optional details."""
    click.secho(f"✗ {message}", fg="red", err=True)
    if details:
        click.echo(f"  {details}", err=True)


def print_info(message: str) -> None:
    """Print info message."""
    click.secho(f"ℹ {message}", fg="blue", err=True)


def print_json(data: Any) -> None:
    """Print data as indented JSON to stdout."""
    click.echo(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def confirm_action(message: str, default: bool = False) -> bool:
    """Ask user for confirmation."""
    return click.confirm(message, default=default)


def load_json_file(file_path: Path) -> Any:
    """
    Load JSON from file.

    Args:
        file_path: Path to JSON file

    Returns:
        Parsed JSON data

    Raises:
        ValueError: If file cannot be read or parsed
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_path}: {e}")
    except OSError as e:
        raise ValueError(f"Cannot read file {file_path}: {e}")


def parse_filters(filters: List[str]) -> Dict[str, str]:
    """
    Parse ``key=value`` filter strings.

    Values are kept as raw strings; the query string is sent as typed.

    Args:
        filters: List of ``key=value`` strings

    Returns:
        Filter mapping

    Raises:
        ValueError: If a filter has no ``=``
    """
    result: Dict[str, str] = {}

    for item in filters:
        if "=" not in item:
            raise ValueError(f"Invalid filter format: {item}. Use key=value")

        key, value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError(f"Invalid filter format: {item}. Key is empty")

        result[key] = value.strip()

    return result


def parse_payload(value: str) -> Any:
    """
    Parse a request payload given on the command line.

    ``@path`` loads JSON from a file; anything else must be inline JSON.

    Raises:
        ValueError: If the payload is not valid JSON
    """
    if value.startswith("@"):
        return load_json_file(Path(value[1:]))

    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON payload: {e}")
