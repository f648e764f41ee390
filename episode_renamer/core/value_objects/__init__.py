"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- MediaKind : Type de media (MOVIE, TV_SHOW, UNCLASSIFIED)
- MetadataRecord : Metadonnees normalisees d'un fichier
- kind_from_signals : Reconstruction du type depuis les deux signaux de tag
- PlacementOptions : Options de placement d'une execution
- DestinationPath : Emplacement cible calcule
"""

from episode_renamer.core.value_objects.metadata import (
    MediaKind,
    MetadataRecord,
    kind_from_signals,
)
from episode_renamer.core.value_objects.placement import (
    DEFAULT_MISSING_YEAR_TEXT,
    DestinationPath,
    PlacementOptions,
)

__all__ = [
    "MediaKind",
    "MetadataRecord",
    "kind_from_signals",
    "DEFAULT_MISSING_YEAR_TEXT",
    "DestinationPath",
    "PlacementOptions",
]
