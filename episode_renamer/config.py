"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe
EPISODE_RENAMER_, et peut optionnellement être fournie via un fichier .env.

Les options de la ligne de commande (--movies, --tv) sont prioritaires sur
les répertoires configurés ici.
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from episode_renamer.core.value_objects import DEFAULT_MISSING_YEAR_TEXT


def expand_path(value: str | Path) -> Path:
    """Étend les variables d'environnement et ~ dans un chemin."""
    return Path(os.path.expandvars(str(value))).expanduser()


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe EPISODE_RENAMER_.
    Exemple : EPISODE_RENAMER_MOVIES_DIR=~/Videos

    Les chemins sont automatiquement étendus (~ et $VARIABLES).
    """

    model_config = SettingsConfigDict(
        env_prefix="EPISODE_RENAMER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Destinations par défaut (chacune se replie sur l'autre)
    movies_dir: Optional[Path] = Field(default=None)
    tv_dir: Optional[Path] = Field(default=None)

    # Rendu d'une année absente dans le nom des films
    missing_year_text: str = Field(default=DEFAULT_MISSING_YEAR_TEXT)

    # Logging (stderr, + fichier JSON avec rotation si log_file est défini)
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("movies_dir", "tv_dir", "log_file", mode="before")
    @classmethod
    def expand_optional_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Étend ~ et les variables d'environnement dans les chemins."""
        if v is None or v == "":
            return None
        return expand_path(v)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()
