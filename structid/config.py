"""Settings read from the environment (and a ``.env`` file, if present).

    STRUCTID_TESTERS    default | full | comma-separated discipline names
    STRUCTID_LANG       pl | en
    STRUCTID_LOG_LEVEL  logging level name, e.g. DEBUG
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .report import LANGUAGES
from .result import Err, Ok, Result
from .testers import ALL_DISCIPLINES, DEFAULT_DISCIPLINES, Discipline


@dataclass(frozen=True)
class Settings:
    disciplines: tuple[Discipline, ...] = DEFAULT_DISCIPLINES
    lang: str = "pl"
    log_level: int = logging.WARNING


def parse_disciplines(text: str) -> Result[tuple[Discipline, ...], ValueError]:
    """Resolve ``default``, ``full`` or a comma-separated list of names."""
    match text.strip().lower():
        case "" | "default":
            return Ok(DEFAULT_DISCIPLINES)
        case "full" | "all":
            return Ok(ALL_DISCIPLINES)
        case listing:
            resolved: list[Discipline] = []
            for part in listing.split(","):
                discipline = Discipline.from_name(part)
                if discipline is None:
                    return Err(ValueError(f"Unknown discipline: {part.strip()!r}"))
                resolved.append(discipline)
            return Ok(tuple(resolved))


def parse_log_level(text: str) -> Result[int, ValueError]:
    level = logging.getLevelName(text.strip().upper())
    match level:
        case int():
            return Ok(level)
        case _:
            return Err(ValueError(f"Unknown log level: {text!r}"))


def load_settings() -> Result[Settings, ValueError]:
    """Build :class:`Settings` from ``STRUCTID_*`` environment variables."""
    load_dotenv()

    match parse_disciplines(os.getenv("STRUCTID_TESTERS", "default")):
        case Err() as err:
            return err
        case Ok(disciplines):
            pass

    lang = os.getenv("STRUCTID_LANG", "pl").strip().lower()
    if lang not in LANGUAGES:
        return Err(ValueError(f"STRUCTID_LANG must be one of {LANGUAGES}, got {lang!r}"))

    match parse_log_level(os.getenv("STRUCTID_LOG_LEVEL", "WARNING")):
        case Err() as err:
            return err
        case Ok(log_level):
            pass

    return Ok(Settings(disciplines=disciplines, lang=lang, log_level=log_level))
