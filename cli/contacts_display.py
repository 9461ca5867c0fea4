"""Contact table rendering for the CLI"""

from typing import List

from rich.table import Table

from contacts.models import Contact


def show_contacts(contacts: List[Contact], console):
    """
    Display contacts as a table

    Args:
        contacts: Normalized contacts
        console: Rich console for output
    """
    table = Table(title=f"Podio Contacts ({len(contacts)})")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Email")
    table.add_column("Phone Numbers")
    table.add_column("URL", style="dim")

    for contact in contacts:
        phones = ", ".join(
            f"{phone.phone_number} ({phone.label.value})" if phone.label else phone.phone_number
            for phone in contact.phone_numbers
        )
        table.add_row(contact.id, contact.name or "", contact.email or "-", phones or "-", contact.contact_url or "")

    console.print(table)
