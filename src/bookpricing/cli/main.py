"""
CLI: print the pricing comparison report.
No arguments or flags; logging level comes from BOOKPRICING_LOG_LEVEL.
"""
import typer

from bookpricing import demo
from bookpricing.core import configure_logging, load_settings
from bookpricing.errors import PricingError

app = typer.Typer(help="Book pricing: inheritance vs composition.", add_completion=False)


@app.command()
def report() -> None:
    """Print final prices for the sample books under both designs."""
    settings = load_settings()
    configure_logging(settings.log_level)
    try:
        demo.run(echo=typer.echo)
    except PricingError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


def main() -> None:
    """Entry point for the bookpricing console command."""
    app()


if __name__ == "__main__":
    main()
