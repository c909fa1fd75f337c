"""Operator CLI for the book service."""

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from src.book_service.core.services import (
    BookRecordService,
    DbManageService,
    DbSessionService,
)
from src.book_service.runtime.context import get_config

console = Console()

app = typer.Typer(
    help="📚 Book Service CLI - database and server commands",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command("init-db")
def init_db(
    drop: bool = typer.Option(False, "--drop", help="Drop existing tables first"),
) -> None:
    """Create the book table on the configured database."""
    database_service = DbSessionService()
    manager = DbManageService(database_service.engine)
    try:
        if drop:
            manager.drop_all()
        manager.create_all()
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()

    console.print("[green]✅ Database initialized[/green]")


@app.command("list")
def list_books() -> None:
    """Print every book ordered by title."""
    database_service = DbSessionService()
    try:
        books = BookRecordService(database_service).list_books()
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to list books: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()

    if not books:
        console.print("[yellow]No books found[/yellow]")
        return

    table = Table(title="Books")
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Author", style="blue")
    table.add_column("Published", style="magenta")
    table.add_column("ISBN", style="yellow")

    for book in books:
        table.add_row(
            book.id,
            book.title,
            book.author,
            book.published_date.isoformat() if book.published_date else "",
            book.isbn or "",
        )

    console.print(table)
    console.print(f"\n[green]Found {len(books)} books[/green]")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (defaults to config)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port (defaults to config)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "src.book_service.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
        access_log=False,
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
