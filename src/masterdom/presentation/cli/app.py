"""Masterdom CLI application using Typer.

Command-line utilities for operators: secret generation for deployment
configuration, schema management and bootstrapping admin accounts.
"""

import asyncio
import secrets

import typer
import uvicorn
from rich.console import Console
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from masterdom.application.commands.admin import PromoteUserCommand
from masterdom.domain.shared.exceptions import DomainException
from masterdom.domain.user import User
from masterdom.infrastructure.persistence.sqlalchemy.engine import build_engine
from masterdom.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)
from masterdom.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from masterdom_config.settings import get_settings

app = typer.Typer(
    name="masterdom",
    help="Masterdom - services marketplace CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)

admin_app = typer.Typer(
    name="admin",
    help="Admin account management",
    no_args_is_help=True,
)
app.add_typer(admin_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Masterdom configuration.

    Generates the two required secrets:
    - JWT_SECRET_KEY: Secret for signing JWT authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Masterdom Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes for a strong HS256 key
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


@db_app.command("init")
def db_init() -> None:
    """Create all missing tables. Existing tables are left untouched."""
    asyncio.run(create_tables())
    console.print("[green]Database schema is up to date.[/green]")


@db_app.command("drop")
def db_drop(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Skip the confirmation prompt",
    ),
) -> None:
    """Drop all tables and every row in them."""
    if not force:
        typer.confirm(
            "This deletes ALL marketplace data. Continue?",
            abort=True,
        )
    asyncio.run(drop_tables())
    console.print("[yellow]All tables dropped.[/yellow]")


async def _promote(email: str) -> User:
    engine = build_engine(get_settings().database_url)
    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    try:
        async with session_maker() as session:
            factory = SQLAlchemyRepositoryFactory(session)
            user = await PromoteUserCommand.from_factory(factory).execute(email)
            await session.commit()
            return user
    finally:
        await engine.dispose()


@admin_app.command("promote")
def promote(email: str = typer.Argument(..., help="Email of the user")) -> None:
    """Grant admin rights to a registered user."""
    try:
        user = asyncio.run(_promote(email))
    except DomainException as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1) from e

    console.print(f"[green]{user.email} is now an admin.[/green]")


@app.command("serve")
def serve(
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "masterdom.presentation.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
