"""
Configuration du logging du service Catalogue via loguru.

Deux sorties :
- console : une ligne par evenement, suivie des champs structures
  (content_id, genre, count...) passes en kwargs aux appels du logger ;
- fichier : JSON avec rotation, ou ces memes champs sont sous record.extra.
"""

import sys
from pathlib import Path
from typing import Any, TextIO

from loguru import logger

# "app" est pose sur tous les enregistrements, "fields" par console_format
_HIDDEN_FIELDS = {"app", "fields"}

_CONSOLE_PREFIX = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def render_fields(extra: dict[str, Any]) -> str:
    """Rend les champs structures en 'cle=valeur', dans l'ordre d'appel."""
    return " ".join(
        f"{key}={value}" for key, value in extra.items() if key not in _HIDDEN_FIELDS
    )


def console_format(record: dict[str, Any]) -> str:
    """
    Format console de loguru.

    Les champs sont rendus a part puis references par {extra[fields]} :
    le gabarit retourne est reinterprete par loguru, une valeur contenant
    des accolades ne doit donc pas y etre inseree telle quelle.
    """
    fields = render_fields(record["extra"])
    record["extra"]["fields"] = fields
    if fields:
        return _CONSOLE_PREFIX + " <dim>{extra[fields]}</dim>\n{exception}"
    return _CONSOLE_PREFIX + "\n{exception}"


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/catalogue.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    console: TextIO = sys.stderr,
) -> None:
    """Configure les sorties de log du service.

    Args :
        log_level : Niveau minimum de la sortie console
        log_file : Fichier JSON (le dossier parent est cree)
        rotation_size : Taille declenchant la rotation (ex: "10 MB")
        retention_count : Nombre d'archives conservees
        console : Flux de la sortie console

    Rappelable (CLI puis serveur, tests) : les sorties precedentes sont retirees.
    """
    logger.remove()
    logger.configure(extra={"app": "catalogue"})

    logger.add(
        console,
        level=log_level,
        format=console_format,
        colorize=console.isatty(),
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configure", log_file=str(log_file), level=log_level)
