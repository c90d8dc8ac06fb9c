"""
Phone number commands for TingTing CLI.
"""

import click

from . import TingTingContext, pass_context, execute


def register_phone_commands(cli: click.Group) -> None:
    """Register phone number commands with the CLI."""
    
    @cli.group('phones')
    def phones():
        """List phone numbers."""
    
    @phones.command('broker')
    @pass_context
    def phones_broker(ctx: TingTingContext):
        """List all broker phone numbers."""
        execute(ctx, lambda client: client.active_broker_phones())
    
    @phones.command('active')
    @pass_context
    def phones_active(ctx: TingTingContext):
        """List active phone numbers assigned to you."""
        execute(ctx, lambda client: client.active_user_phones())
