"""
Campaign commands for TingTing CLI.

Commands:
- campaigns list: List campaigns
- campaigns create / update / delete: Manage campaigns
- campaigns run: Start a campaign
- campaigns voice: Set a campaign's voice assistance message
"""

from typing import Any, Dict

import click

from . import (
    TingTingContext,
    pass_context,
    payload_option,
    filter_option,
    execute,
    print_info,
)
from ..utils import confirm_action


def register_campaign_commands(cli: click.Group) -> None:
    """Register campaign commands with the CLI."""
    
    @cli.group('campaigns')
    def campaigns():
        """Manage voice/SMS campaigns."""
    
    @campaigns.command('list')
    @filter_option
    @pass_context
    def campaigns_list(ctx: TingTingContext, filters: Dict[str, Any]):
        """
        List campaigns.
        
        \b
        Examples:
          tingting campaigns list
          tingting campaigns list -F limit=5 -F offset=0 -F "status=Not Started"
        """
        execute(ctx, lambda client: client.list_campaigns(filters))
    
    @campaigns.command('create')
    @payload_option()
    @pass_context
    def campaigns_create(ctx: TingTingContext, payload: Dict[str, Any]):
        """
        Create a campaign.
        
        \b
        Examples:
          tingting campaigns create -d @campaign.json
        """
        execute(ctx, lambda client: client.create_campaign(payload))
    
    @campaigns.command('update')
    @click.argument('campaign_id', type=int)
    @payload_option()
    @pass_context
    def campaigns_update(ctx: TingTingContext, campaign_id: int, payload: Dict[str, Any]):
        """Update a campaign."""
        execute(ctx, lambda client: client.update_campaign(campaign_id, payload))
    
    @campaigns.command('delete')
    @click.argument('campaign_id', type=int)
    @click.option('--yes', '-y', is_flag=True, help='Skip confirmation')
    @pass_context
    def campaigns_delete(ctx: TingTingContext, campaign_id: int, yes: bool):
        """Delete a campaign."""
        if not yes and not confirm_action(f"Delete campaign {campaign_id}?"):
            print_info("Cancelled.")
            return
        
        execute(ctx, lambda client: client.delete_campaign(campaign_id))
    
    @campaigns.command('run')
    @click.argument('campaign_id', type=int)
    @pass_context
    def campaigns_run(ctx: TingTingContext, campaign_id: int):
        """Run a campaign."""
        execute(ctx, lambda client: client.run_campaign(campaign_id))
    
    @campaigns.command('voice')
    @click.argument('campaign_id', type=int)
    @payload_option()
    @pass_context
    def campaigns_voice(ctx: TingTingContext, campaign_id: int, payload: Dict[str, Any]):
        """Add voice assistance to a campaign."""
        execute(ctx, lambda client: client.add_voice_assistance(campaign_id, payload))
