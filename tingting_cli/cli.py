"""
TingTing CLI - Command Line Interface for the TingTing API.

This module provides the main CLI entry point and registers commands for:
- Authentication and API keys
- Phone numbers
- Campaign management
- Contact management
- OTP delivery
"""

import sys
import logging
from typing import Optional

import click

from . import __version__, __prog_name__
from .config import ClientConfig, DEFAULT_BASE_URL, ENV_BASE_URL, ENV_API_TOKEN
from .exceptions import ConfigurationError
from .utils import setup_logging, print_error
from .commands import TingTingContext
from .commands.auth import register_auth_commands
from .commands.phones import register_phone_commands
from .commands.campaigns import register_campaign_commands
from .commands.contacts import register_contact_commands
from .commands.otp import register_otp_commands

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name=__prog_name__)
@click.option(
    '--base-url',
    envvar=ENV_BASE_URL,
    help=f'API base URL (default: {DEFAULT_BASE_URL})'
)
@click.option(
    '--token',
    envvar=ENV_API_TOKEN,
    help='Bearer token (API token or access token from login)'
)
@click.option(
    '-v', '--verbose',
    is_flag=True,
    help='Enable verbose output'
)
@click.option(
    '-q', '--quiet',
    is_flag=True,
    help='Suppress non-essential output'
)
@click.pass_context
def cli(ctx, base_url: Optional[str], token: Optional[str], verbose: bool, quiet: bool):
    """
    TingTing CLI - Voice/SMS campaign management tool.

    Every command sends one request to the TingTing API and prints the
    JSON response.

    \b
    Quick Start:
      1. Login:                 tingting login --email me@example.com
      2. Export the token:      export TINGTING_API_TOKEN=<access token>
      3. List campaigns:        tingting campaigns list -F limit=5
      4. Upload contacts:       tingting contacts bulk 42 --file contacts.csv

    \b
    Environment Variables:
      TINGTING_BASE_URL     - API base URL
      TINGTING_API_TOKEN    - Bearer token
      TINGTING_EMAIL        - Account email for login
      TINGTING_PASSWORD     - Account password for login
      TINGTING_TIMEOUT      - Request timeout in seconds
      TINGTING_VERIFY_SSL   - Set to 0 to disable SSL verification
    """
    setup_logging(verbose, quiet)

    obj = ctx.ensure_object(TingTingContext)
    obj.verbose = verbose
    obj.quiet = quiet

    try:
        obj.config = ClientConfig.from_env().replace(base_url=base_url, api_token=token)
    except ConfigurationError as e:
        print_error(f"Invalid configuration: {e}")
        sys.exit(1)


register_auth_commands(cli)
register_phone_commands(cli)
register_campaign_commands(cli)
register_contact_commands(cli)
register_otp_commands(cli)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
