"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .triage import action, run

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="gh-triage",
    help="Mark and close stale GitHub issues and pull requests",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="run", context_settings={"help_option_names": ["-h", "--help"]})(
    run
)
app.command(name="action", context_settings={"help_option_names": ["-h", "--help"]})(
    action
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from gh_triage import __version__

    console.print(f"GitHub Stale Triage v{__version__}")


if __name__ == "__main__":
    app()
