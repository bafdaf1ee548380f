import sys

from loguru import logger
from rich.console import Console

from clinic.config import AppConfig
from clinic.console.menu import Menu
from clinic.registry.factory import build_registry


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def main() -> None:
    config = AppConfig()
    configure_logging(config.log_level)

    registry = build_registry(config)
    console = Console()
    menu = Menu(registry, console=console, clock=registry.today)

    try:
        menu.start()
    except (KeyboardInterrupt, EOFError):
        console.print()
    console.print("Goodbye!")
