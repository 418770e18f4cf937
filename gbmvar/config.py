"""Runtime settings read from the environment and an optional .env file."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "GBMVAR_"


@dataclass(frozen=True)
class Settings:
    """Settings for the command-line front end.

    Attributes
    ----------
    log_level : str
        Console logging level
    log_file : str, optional
        Rotating log file path; no file logging when unset
    seed : int, optional
        Default random seed for simulations
    max_plotted_paths : int
        Number of individual paths drawn on charts
    """

    log_level: str = "INFO"
    log_file: Optional[str] = None
    seed: Optional[int] = None
    max_plotted_paths: int = 100


def _read_int(name: str) -> Optional[int]:
    raw = os.getenv(ENV_PREFIX + name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got '{raw}'") from None


def get_settings(env_file: Optional[str] = None) -> Settings:
    """Load settings, reading ``env_file`` (or ./.env) first if it exists.

    Variables already present in the environment take precedence over the
    file.

    Raises
    ------
    ValueError
        If an integer setting cannot be parsed
    """
    if env_file is not None:
        if Path(env_file).exists():
            load_dotenv(env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))

    max_plotted_paths = _read_int("MAX_PLOTTED_PATHS")
    return Settings(
        log_level=os.getenv(ENV_PREFIX + "LOG_LEVEL", "INFO").strip() or "INFO",
        log_file=os.getenv(ENV_PREFIX + "LOG_FILE") or None,
        seed=_read_int("SEED"),
        max_plotted_paths=100 if max_plotted_paths is None else max_plotted_paths,
    )
