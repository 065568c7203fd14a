"""
Quick script to verify Sherlock Domains API client setup
Run this to check your SHERLOCK_ACCESS_TOKEN against the live API

Usage:
    python examples/check_sherlock_connection.py
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from sherlock.api import SherlockClient, AuthenticationError, APIError, NotAuthenticatedError
from sherlock.utils.config import get_settings

console = Console()


def check_search(client: SherlockClient, query: str = "example.com") -> bool:
    """Search is public, so this works without a token"""
    console.print(f"\n[bold cyan]Searching for '{query}'...[/bold cyan]\n")

    try:
        result = client.search(query)

        results_table = Table(show_header=True, header_style="bold magenta")
        results_table.add_column("Domain", style="cyan")
        results_table.add_column("Available", style="yellow")
        results_table.add_column("Price (USD)", style="green")

        for entry in result.get("available", []):
            price_cents = entry.get("price", 0) or 0
            results_table.add_row(entry.get("name", "N/A"), "✅", f"${price_cents / 100:.2f}")
        for entry in result.get("unavailable", []):
            results_table.add_row(entry.get("name", "N/A") if isinstance(entry, dict) else str(entry), "❌", "-")

        console.print(results_table)
        console.print(f"[dim]Search ID: {result.get('id', 'N/A')}[/dim]")
        return True

    except APIError as e:
        console.print(Panel(
            f"[bold red]❌ API Error[/bold red]\n\n{str(e)}",
            title="Error",
            border_style="red"
        ))
        return False


def check_authentication(client: SherlockClient) -> bool:
    """Fetch the profile and owned domains with the configured token"""
    console.print("\n[bold cyan]Testing Sherlock API Authentication...[/bold cyan]\n")

    try:
        profile = client.me()
        domains = client.list_domains()
        if isinstance(domains, dict):
            domains = domains.get("domains", [])

        console.print(Panel(
            f"[bold green]✅ Authentication Successful![/bold green]\n\n"
            f"User: [cyan]{profile.get('email') or profile.get('id', 'N/A')}[/cyan]\n"
            f"Found [cyan]{len(domains)}[/cyan] domain(s) in your account.",
            title="Connection Test",
            border_style="green"
        ))
        return True

    except NotAuthenticatedError:
        console.print(Panel(
            "[bold yellow]No access token configured[/bold yellow]\n\n"
            "[yellow]→ Set SHERLOCK_ACCESS_TOKEN in your environment or .env file[/yellow]",
            title="Skipped",
            border_style="yellow"
        ))
        return False

    except AuthenticationError as e:
        console.print(Panel(
            f"[bold red]❌ Authentication Failed[/bold red]\n\n{str(e)}",
            title="Error",
            border_style="red"
        ))
        return False

    except APIError as e:
        console.print(Panel(
            f"[bold red]❌ API Error[/bold red]\n\n{str(e)}",
            title="Error",
            border_style="red"
        ))
        return False


def main():
    settings = get_settings()

    info_table = Table(show_header=False, box=None)
    info_table.add_row("[cyan]API URL:[/cyan]", f"[blue]{settings.base_url}[/blue]")
    info_table.add_row("[cyan]Token:[/cyan]", "[green]set[/green]" if settings.access_token else "[red]not set[/red]")
    console.print(Panel.fit(info_table, title="Sherlock Domains", border_style="magenta"))

    client = SherlockClient.from_settings(settings)
    check_search(client)
    check_authentication(client)


if __name__ == "__main__":
    main()
