# app/shared/config.py
import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum

# Directory holding the shipped irregular-form dictionaries.
_DEFAULT_LEXICON_DIR = Path(__file__).resolve().parents[2] / "lexicon" / "data"


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "Plural Architect"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    # --- Irregular-form dictionaries ---
    # Two-column "singular plural" text files, case-folded on load.
    LEXICON_DIR: str = str(_DEFAULT_LEXICON_DIR)
    NOUNS_FILENAME: str = "plural_nouns.txt"
    VERBS_FILENAME: str = "plural_verbs.txt"

    # --- Output bounds ---
    # Capacity of phrase buffers; content never exceeds MAX_STRING_LENGTH - 1.
    MAX_STRING_LENGTH: int = 4096

    # --- Dynamic Path Resolution ---

    @property
    def NOUNS_PATH(self) -> str:
        return os.path.join(self.LEXICON_DIR, self.NOUNS_FILENAME)

    @property
    def VERBS_PATH(self) -> str:
        return os.path.join(self.LEXICON_DIR, self.VERBS_FILENAME)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
