"""
Couche domaine (core).

Contient les entités, ports (interfaces abstraites) et objets valeur.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, mutagen, CLI).

Sous-packages :
- entities/ : SourceFile
- ports/ : Interfaces abstraites (IFileSystem, ITagReader)
- value_objects/ : Objets valeur immutables (MetadataRecord, PlacementOptions, DestinationPath)
"""
