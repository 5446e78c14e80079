"""Main CLI application module."""

import typer

from .dev_commands import dev_app
from .product_commands import products_app

# Create the main CLI application
app = typer.Typer(
    help="Product Catalog CLI - run the API and inspect the catalog",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(dev_app, name="dev")
app.add_typer(products_app, name="products")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
