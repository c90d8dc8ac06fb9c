"""
Authentication commands for TingTing CLI.

Commands:
- login: Obtain access and refresh tokens
- refresh: Refresh an access token
- profile: Show the authenticated user
- keys generate / keys show: Manage the static API token
"""

from typing import Optional

import click

from . import (
    TingTingContext,
    pass_context,
    execute,
    print_info,
)


def register_auth_commands(cli: click.Group) -> None:
    """Register authentication commands with the CLI."""
    
    @cli.command('login')
    @click.option('--email', '-e', help='Account email (default: TINGTING_EMAIL)')
    @click.option('--password', '-p', help='Password (default: TINGTING_PASSWORD, prompts if unset)')
    @pass_context
    def login(ctx: TingTingContext, email: Optional[str], password: Optional[str]):
        """
        Login with email and password to obtain tokens.
        
        Tokens are printed, not stored. Export the access token as
        TINGTING_API_TOKEN (or pass --token) to use it in later commands.
        
        \b
        Examples:
          tingting login
          tingting login --email me@example.com
        """
        email = email or ctx.config.email or click.prompt("Email")
        password = password or ctx.config.password or click.prompt("Password", hide_input=True)
        
        execute(ctx, lambda client: client.login(email, password))
        
        if not ctx.quiet:
            print_info("Export the access token as TINGTING_API_TOKEN to use it.")
    
    @cli.command('refresh')
    @click.argument('refresh_token')
    @pass_context
    def refresh(ctx: TingTingContext, refresh_token: str):
        """Exchange a refresh token for a new access token."""
        execute(ctx, lambda client: client.refresh_token(refresh_token))
    
    @cli.command('profile')
    @pass_context
    def profile(ctx: TingTingContext):
        """Show the authenticated user's profile."""
        execute(ctx, lambda client: client.user_detail())
    
    @cli.group('keys')
    def keys():
        """Manage the static API token."""
    
    @keys.command('generate')
    @pass_context
    def keys_generate(ctx: TingTingContext):
        """
        Generate a new static API token.
        
        Previously generated tokens stop working.
        """
        execute(ctx, lambda client: client.generate_api_keys())
    
    @keys.command('show')
    @pass_context
    def keys_show(ctx: TingTingContext):
        """Show the current static API token."""
        execute(ctx, lambda client: client.get_api_keys())
