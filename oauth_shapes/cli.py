"""Command-line validator for OAuth wire documents.

Usage:
    python -m oauth_shapes validate token-response response.json
    cat metadata.json | python -m oauth_shapes validate authorization-server-metadata -
    python -m oauth_shapes kinds
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from oauth_shapes.log import configure_logging
from oauth_shapes.schemas import SCHEMAS, get_schema
from oauth_shapes.validation import ValidationResult, validate_json

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


class ValidatorCLI:
    """Validate documents and render results with rich"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def show_kinds(self) -> int:
        """List registered artifact kinds"""
        table = Table(title="Artifact kinds")
        table.add_column("Kind", style="cyan")
        table.add_column("Schema")
        table.add_column("Unknown fields")
        for kind, schema in SCHEMAS.items():
            table.add_row(kind, schema.__name__, schema.additional_fields().value)
        self.console.print(table)
        return EXIT_OK

    def read_document(self, source: str) -> Optional[bytes]:
        """Read raw document bytes from a file path or '-' for stdin"""
        if source == "-":
            return sys.stdin.buffer.read()
        try:
            return Path(source).read_bytes()
        except OSError as e:
            self.show_error(f"Cannot read {source}: {e}")
            return None

    def show_error(self, message: str) -> None:
        self.console.print(Panel(
            f"[bold red]{escape(message)}[/bold red]",
            title="❌ Error",
            border_style="red"
        ))

    def show_result(self, result: ValidationResult) -> None:
        """Render the normalized document or the violation table"""
        name = result.schema.__name__
        if result.ok:
            self.console.print(f"[green]✓[/green] Valid {name}")
            self.console.print_json(data=result.value.to_wire())
            return

        table = Table(title=f"Invalid {name}", title_style="bold red")
        table.add_column("Path", style="cyan")
        table.add_column("Kind", style="yellow")
        table.add_column("Message")
        for violation in result.violations:
            table.add_row(escape(violation.path or "<root>"), violation.kind.value, escape(violation.message))
        self.console.print(table)

    def validate(self, kind: str, source: str) -> int:
        try:
            schema = get_schema(kind)
        except ValueError as e:
            self.show_error(str(e))
            return EXIT_USAGE

        document = self.read_document(source)
        if document is None:
            return EXIT_USAGE

        result = validate_json(schema, document)
        logger.info(f"Validated {source} as {schema.__name__}: ok={result.ok}")
        self.show_result(result)
        return EXIT_OK if result.ok else EXIT_INVALID


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oauth-shapes",
        description="Validate OAuth 2.1 wire documents"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser("validate", help="Validate a JSON document")
    validate_parser.add_argument("kind", help="Artifact kind, see 'kinds'")
    validate_parser.add_argument("source", help="Path to a JSON file, or '-' for stdin")

    subparsers.add_parser("kinds", help="List artifact kinds")
    return parser


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    """Entry point for CLI"""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_USAGE

    configure_logging()
    cli = ValidatorCLI(console)

    if args.command == "kinds":
        return cli.show_kinds()
    return cli.validate(args.kind, args.source)


if __name__ == "__main__":
    sys.exit(main())
