"""Locate word lists in the per-user data directory.

Word lists are plain files named by locale code (``en``, ``fr``, ...), one
word per line. Fetching them is left to the user; this module only finds
and loads what is installed.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

import typer

from didyoumean.suggest.dictionary import Dictionary
from didyoumean.suggest.errors import WordListNotFound
from didyoumean.utils.log import get_logger

logger = get_logger(__name__)

APP_NAME = "didyoumean"
DEFAULT_LANG = "en"
WORDLIST_URL = "https://raw.githubusercontent.com/hisbaan/wordlists/main/{lang}"
DATA_DIR_ENV = "DIDYOUMEAN_DATA_DIR"

_LANG_RE = re.compile(r"^[a-z]{2,3}([-_][A-Za-z0-9]{2,8})*$")


def data_dir() -> Path:
    """Directory holding the installed word lists.

    ``$DIDYOUMEAN_DATA_DIR`` takes precedence over the platform app dir.
    """
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override)
    return Path(typer.get_app_dir(APP_NAME))


def word_list_path(lang: str) -> Path:
    if not _LANG_RE.match(lang):
        raise WordListNotFound(f"{lang!r} is not a recognized locale code")
    return data_dir() / lang


def installed_langs() -> list[str]:
    root = data_dir()
    if not root.is_dir():
        return []
    return sorted(p.name for p in root.iterdir() if p.is_file() and _LANG_RE.match(p.name))


def load_dictionary(
    lang: str | None = None,
    path: Path | None = None,
    case_sensitive: bool = False,
) -> Dictionary:
    """Load the word list at ``path``, or the installed list for ``lang``."""
    if path is None:
        lang = lang or DEFAULT_LANG
        path = word_list_path(lang)
        if not path.is_file():
            raise WordListNotFound(
                f"There is currently no word list for {lang} in {path.parent}. "
                f"Download it from {WORDLIST_URL.format(lang=lang)}"
            )
    elif not path.is_file():
        raise WordListNotFound(f"Word list not found: {path}")
    logger.debug("Reading word list %s", path)
    return Dictionary.from_file(path, case_sensitive=case_sensitive)
