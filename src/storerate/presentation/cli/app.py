"""StoreRate CLI application using Typer.

Operational commands: secret generation, schema creation, administrator
bootstrap, and running the API server.
"""

import asyncio
import secrets
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from storerate.domain.shared.exceptions import DomainException, ValidationError
from storerate.infrastructure.persistence.sqlalchemy.database import Database
from storerate.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    display_url,
)
from storerate_config.settings import Settings, get_settings
from storerate_identity.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserRole,
    validate_new_user,
)
from storerate_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)
from storerate_identity.services import PasswordHashingService

app = typer.Typer(
    name="storerate",
    help="StoreRate - store rating platform CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
admin_app = typer.Typer(
    name="admin",
    help="Administrator account management",
    no_args_is_help=True,
)
app.add_typer(secrets_app)
app.add_typer(db_app)
app.add_typer(admin_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for StoreRate configuration.

    Generates two required secrets:
    - JWT_SECRET_KEY: Secret for signing JWT authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]StoreRate Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256
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
    """Create all missing tables. Existing tables and data are untouched."""
    settings = get_settings()
    console.print(f"Database: [cyan]{display_url(settings.database_url)}[/cyan]")
    asyncio.run(create_tables(settings))
    console.print("[green]Database schema is up to date.[/green]")


async def bootstrap_admin(
    settings: Settings,
    name: str,
    email: str,
    password: str,
    address: str | None = None,
) -> User:
    """Create an administrator directly in the database, creating tables first."""
    validate_new_user(name, email, password, address).raise_if_invalid()

    database = Database.from_settings(settings)
    try:
        await database.create_tables()
        async with database.session() as session:
            user_repo = UserRepositorySQLAlchemy(session)
            if await user_repo.exists_by_email(email):
                raise EmailAlreadyExistsError(email.strip().lower())

            password_service = PasswordHashingService(rounds=settings.bcrypt_rounds)
            user = User.create(
                name=name,
                email=email,
                address=address,
                role=UserRole.ADMIN,
            )
            await user_repo.save(user, password_hash=password_service.hash(password))
            await session.commit()
            return user
    finally:
        await database.dispose()


@admin_app.command("create")
def create_admin(
    name: str = typer.Option(..., "--name", help="Full name (20-60 characters)"),
    email: str = typer.Option(..., "--email", help="Login email"),
    address: Optional[str] = typer.Option(None, "--address", help="Postal address"),
    password: str = typer.Option(
        ...,
        "--password",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password (prompted when omitted)",
    ),
) -> None:
    """Bootstrap an administrator account.

    Administrators cannot be created through the public API without an
    existing administrator, so the first one is created here.
    """
    settings = get_settings()
    try:
        user = asyncio.run(bootstrap_admin(settings, name, email, password, address))
    except ValidationError as e:
        console.print(f"[red]{e.message}[/red]")
        for error in e.errors:
            console.print(f"  [red]{error.field}[/red]: {error.message}")
        raise typer.Exit(code=1) from e
    except DomainException as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=1) from e

    console.print(
        f"[green]Administrator created:[/green] {user.email} ([dim]{user.id}[/dim])"
    )


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "storerate.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
