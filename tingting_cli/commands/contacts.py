"""
Contact commands for TingTing CLI.

Commands:
- contacts add / bulk: Add contacts to a campaign
- contacts list: List a campaign's contacts
- contacts delete: Delete a contact
- contacts attributes / edit-attributes: Contact attributes
- contacts update-number: Change a contact's phone number
"""

from pathlib import Path
from typing import Any, Dict, Optional

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


def register_contact_commands(cli: click.Group) -> None:
    """Register contact commands with the CLI."""
    
    @cli.group('contacts')
    def contacts():
        """Manage campaign contacts."""
    
    @contacts.command('add')
    @click.argument('campaign_id', type=int)
    @payload_option()
    @pass_context
    def contacts_add(ctx: TingTingContext, campaign_id: int, payload: Any):
        """
        Add a contact, or a JSON list of contacts, to a campaign.
        
        \b
        Examples:
          tingting contacts add 42 -d '{"number": "9800000000"}'
          tingting contacts add 42 -d @contacts.json
        """
        execute(ctx, lambda client: client.add_contact(campaign_id, payload))
    
    @contacts.command('bulk')
    @click.argument('campaign_id', type=int)
    @click.option(
        '--file', 'file_path',
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help='CSV/Excel file to upload'
    )
    @payload_option(required=False)
    @pass_context
    def contacts_bulk(
        ctx: TingTingContext,
        campaign_id: int,
        file_path: Optional[Path],
        payload: Any
    ):
        """
        Add bulk contacts from a file upload or JSON data.
        
        \b
        Examples:
          tingting contacts bulk 42 --file contacts.csv
          tingting contacts bulk 42 -d @contacts.json
        """
        if (file_path is None) == (payload is None):
            raise click.UsageError("Provide exactly one of --file or --data.")
        
        bulk_data = str(file_path) if file_path is not None else payload
        execute(ctx, lambda client: client.add_bulk_contacts(campaign_id, bulk_data))
    
    @contacts.command('list')
    @click.argument('campaign_id', type=int)
    @filter_option
    @pass_context
    def contacts_list(ctx: TingTingContext, campaign_id: int, filters: Dict[str, Any]):
        """List all contacts of a campaign."""
        execute(ctx, lambda client: client.list_contacts(campaign_id, filters))
    
    @contacts.command('delete')
    @click.argument('contact_id', type=int)
    @click.option('--yes', '-y', is_flag=True, help='Skip confirmation')
    @pass_context
    def contacts_delete(ctx: TingTingContext, contact_id: int, yes: bool):
        """Delete a contact."""
        if not yes and not confirm_action(f"Delete contact {contact_id}?"):
            print_info("Cancelled.")
            return
        
        execute(ctx, lambda client: client.delete_contact(contact_id))
    
    @contacts.command('attributes')
    @click.argument('contact_id', type=int)
    @pass_context
    def contacts_attributes(ctx: TingTingContext, contact_id: int):
        """Show a contact's attributes."""
        execute(ctx, lambda client: client.get_contact_attributes(contact_id))
    
    @contacts.command('edit-attributes')
    @click.argument('contact_id', type=int)
    @payload_option()
    @pass_context
    def contacts_edit_attributes(ctx: TingTingContext, contact_id: int, payload: Dict[str, Any]):
        """
        Edit a contact's attributes.
        
        \b
        Examples:
          tingting contacts edit-attributes 7 -d '{"name": "Ram", "city": "Kathmandu"}'
        """
        execute(ctx, lambda client: client.edit_contact_attributes(contact_id, payload))
    
    @contacts.command('update-number')
    @click.argument('contact_id', type=int)
    @click.argument('number')
    @pass_context
    def contacts_update_number(ctx: TingTingContext, contact_id: int, number: str):
        """Change a contact's phone number."""
        execute(ctx, lambda client: client.update_contact_number(contact_id, number))
