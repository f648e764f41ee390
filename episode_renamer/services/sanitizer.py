"""
Nettoyage des textes destines au systeme de fichiers.

Ce module fournit les fonctions de normalisation des noms de fichiers
et des chemins de repertoires :
- sanitize_text : guillemets typographiques -> ASCII, separateur -> "_"
- replace_invalid : remplacement des caracteres interdits par "_"

Deux ensembles de caracteres interdits sont definis : un pour les noms
de fichiers, un pour les chemins (qui exclut les separateurs de
repertoires, legitimes dans un chemin).
"""

import os
from pathlib import Path
from typing import Iterable

# Caracteres de controle 0x00-0x1F
_CONTROL_CHARS: tuple[str, ...] = tuple(chr(code) for code in range(0x20))

INVALID_PATH_CHARS: tuple[str, ...] = ('"', "<", ">", "|") + _CONTROL_CHARS + (
    ":",
    "*",
    "?",
)

INVALID_FILE_NAME_CHARS: tuple[str, ...] = INVALID_PATH_CHARS + ("\\", "/")

DEFAULT_REPLACEMENT = "_"

# Guillemets typographiques -> equivalents ASCII
_QUOTE_REPLACEMENTS: dict[str, str] = {
    "\u2019": "'",  # ’ -> '
    "\u2018": "'",  # ‘ -> '
    "\u201c": '"',  # “ -> "
    "\u201d": '"',  # ” -> "
}


def sanitize_text(text: str) -> str:
    """
    Normalise un texte libre destine a un nom.

    Remplace les guillemets typographiques par leurs equivalents ASCII
    et le separateur de chemin de la plateforme par "_". Les autres
    caracteres sont conserves tels quels.

    Args:
        text: Texte a normaliser.

    Returns:
        Texte normalise.
    """
    for typographic, ascii_quote in _QUOTE_REPLACEMENTS.items():
        text = text.replace(typographic, ascii_quote)
    return text.replace(os.sep, DEFAULT_REPLACEMENT)


def replace_invalid(
    text: str,
    invalid_chars: Iterable[str],
    replacement: str = DEFAULT_REPLACEMENT,
) -> str:
    """
    Remplace chaque caractere interdit par le caractere de remplacement.

    Une passe par caractere interdit. Le remplacement n'appartient a aucun
    des ensembles interdits, l'operation est donc idempotente.

    Args:
        text: Texte a nettoyer.
        invalid_chars: Ensemble des caracteres interdits.
        replacement: Caractere de remplacement.

    Returns:
        Texte sans caractere interdit.
    """
    for invalid in invalid_chars:
        text = text.replace(invalid, replacement)
    return text


def sanitize_file_name(name: str) -> str:
    """Nettoie un nom de fichier avec l'ensemble des noms de fichiers."""
    return replace_invalid(name, INVALID_FILE_NAME_CHARS)


def sanitize_directory(directory: Path) -> Path:
    """Nettoie un chemin de repertoire avec l'ensemble des chemins."""
    return Path(replace_invalid(str(directory), INVALID_PATH_CHARS))
