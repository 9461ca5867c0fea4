"""CLI entry point and argument parsing"""

import argparse
import asyncio
import sys

from rich.console import Console

import settings
from bridge.adapter import PodioAdapter
from bridge.models import BridgeConfig
from cli.contacts_display import show_contacts
from config.loader import load_oauth2_config
from errors import PodioBridgeError


console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="podio-bridge", description="Podio contact bridge")
    subparsers = parser.add_subparsers(dest="command")

    serve = subparsers.add_parser("serve", help="Run the bridge HTTP server (default)")
    serve.add_argument("--debug", "-d", action="store_true", help="Enable debug logging")
    serve.add_argument("--bind", "-b", default=None, help="Override bind address (default: from config)")
    serve.add_argument("--port", "-p", type=int, default=None, help="Override port (default: from config)")

    subparsers.add_parser("authorize-url", help="Print the Podio authorization URL")

    exchange = subparsers.add_parser("exchange-code", help="Exchange an authorization code for an API key")
    exchange.add_argument("code", help="Authorization code from the OAuth2 callback")

    contacts = subparsers.add_parser("contacts", help="Fetch and display contacts")
    contacts.add_argument("--api-key", required=True, help="API key in the form <access_token>:<refresh_token>")

    return parser


def run(args: argparse.Namespace) -> int:
    """Execute the parsed command and return the exit code"""
    # Fails fast if any OAuth2 variable is missing
    adapter = PodioAdapter.from_settings(load_oauth2_config(settings.OAUTH2_ENV_PREFIX))

    if args.command == "authorize-url":
        console.print(asyncio.run(adapter.get_oauth2_redirect_url()), soft_wrap=True)
    elif args.command == "exchange-code":
        result = asyncio.run(adapter.handle_oauth2_callback({"code": args.code}))
        console.print("[green]✓ Authorization code exchanged[/green]")
        console.print(result.api_key, soft_wrap=True)
    elif args.command == "contacts":
        contacts = asyncio.run(adapter.get_contacts(BridgeConfig(api_key=args.api_key)))
        show_contacts(contacts, console)
    else:
        from server import BridgeServer

        server = BridgeServer(
            adapter,
            debug=getattr(args, "debug", False),
            bind_address=getattr(args, "bind", None),
            port=getattr(args, "port", None),
        )
        server.run()
    return 0


def main():
    """Entry point for the CLI"""
    args = build_parser().parse_args()

    try:
        sys.exit(run(args))
    except PodioBridgeError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")


if __name__ == "__main__":
    main()
