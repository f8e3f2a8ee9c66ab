"""Seed file lookup in the Boltz data directory."""

import logging
from pathlib import Path
from typing import Iterable, Optional

from boltz_evm.config import Settings, get_settings
from boltz_evm.errors import InvalidCredentialError, MissingCredentialError

logger = logging.getLogger(__name__)


def find_seed_file(candidates: Iterable[Path]) -> Path:
    """Return the first candidate that exists.

    Later candidates are never considered once an earlier one exists.

    Raises:
        MissingCredentialError: If none of the candidates exist
    """
    for path in candidates:
        if path.exists():
            return path

    raise MissingCredentialError()


def read_seed(settings: Optional[Settings] = None) -> str:
    """Read the active seed phrase, stripped of surrounding whitespace.

    Raises:
        MissingCredentialError: If no seed file exists
        InvalidCredentialError: If the seed file is not valid UTF-8
        OSError: If the seed file cannot be read
    """
    settings = settings or get_settings()
    path = find_seed_file(settings.seed_paths)

    logger.info(f"Using wallet seed from {path}")
    try:
        return path.read_text(encoding="utf-8").strip()
    except UnicodeDecodeError as e:
        raise InvalidCredentialError(f"Seed file {path} is not valid UTF-8") from e
