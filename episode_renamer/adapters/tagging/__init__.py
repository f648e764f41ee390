"""
Adaptateurs de lecture des tags.

- Mp4TagReader: Lit les atomes iTunes des fichiers MP4 avec mutagen
"""
