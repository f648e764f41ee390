"""
Episode Renamer - Classement des films et épisodes d'après leurs tags MP4.

Ce package lit les métadonnées iTunes embarquées (type de média, titre,
année, série, saison, épisode), calcule un chemin de destination canonique
et déplace ou copie les fichiers vers l'arborescence cible.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (classement, placement, réconciliation)
- adapters/ : Couche infrastructure (CLI, système de fichiers, mutagen)
"""

__version__ = "0.1.0"
