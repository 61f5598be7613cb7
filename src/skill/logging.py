import logging
import sys


def parse_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    # Unknown names come back as the string "Level <name>".
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=parse_level(level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
