"""
OTP commands for TingTing CLI.
"""

from typing import Any, Dict

import click

from . import (
    TingTingContext,
    pass_context,
    payload_option,
    filter_option,
    execute,
)


def register_otp_commands(cli: click.Group) -> None:
    """Register OTP commands with the CLI."""
    
    @cli.group('otp')
    def otp():
        """Send one-time passwords."""
    
    @otp.command('send')
    @payload_option()
    @pass_context
    def otp_send(ctx: TingTingContext, payload: Dict[str, Any]):
        """
        Send an OTP by voice or SMS.
        
        \b
        Examples:
          tingting otp send -d '{"number": "9800000000", "message": "Your code is 1234"}'
        """
        execute(ctx, lambda client: client.send_otp(payload))
    
    @otp.command('list')
    @filter_option
    @pass_context
    def otp_list(ctx: TingTingContext, filters: Dict[str, Any]):
        """
        List sent OTPs.
        
        \b
        Examples:
          tingting otp list -F limit=10
        """
        execute(ctx, lambda client: client.list_sent_otps(filters))
