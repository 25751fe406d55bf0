"""
Point d'entrée CLI de Catalogue.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

import asyncio
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import Settings
from .container import Container
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="catalogue",
    help="API REST de gestion des contenus média",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration Catalogue")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Préfixe API : {config.api_prefix}")
    typer.echo(f"Écoute : {config.host}:{config.port}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Catalogue v{__version__}")


@app.command(name="init-db")
def init_database() -> None:
    """Crée les tables de la base de données si nécessaire."""
    container.database.init()
    typer.echo(f"Base initialisée : {get_config().database_url}")


@app.command(name="list")
def list_contents(
    title: Annotated[
        Optional[str], typer.Option("--title", "-t", help="Sous-chaîne du titre")
    ] = None,
    genre: Annotated[
        Optional[str], typer.Option("--genre", "-g", help="Genre exact")
    ] = None,
) -> None:
    """Affiche les contenus, filtrés par titre et/ou genre."""
    container.database.init()
    manager = container.contents_manager()
    contents = asyncio.run(manager.get_filtered(title=title, genre=genre))

    if not contents:
        console.print("[yellow]Aucun contenu trouvé[/yellow]")
        raise typer.Exit(code=1)

    table = Table(title=f"Contenus ({len(contents)})")
    table.add_column("ID", style="dim")
    table.add_column("Titre", style="bold")
    table.add_column("Durée", justify="right")
    table.add_column("Début")
    table.add_column("Genres", style="cyan")
    for content in contents:
        table.add_row(
            str(content.id),
            content.title,
            f"{content.duration} min",
            content.start_time.strftime("%Y-%m-%d %H:%M"),
            ", ".join(content.genre_list),
        )
    console.print(table)


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur de l'API."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port
    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de Catalogue", version=__version__)

    app()


if __name__ == "__main__":
    main()
