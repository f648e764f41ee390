"""Sous-package CLI - re-exporte les commandes publiques."""

from episode_renamer.adapters.cli.commands import info, rename

__all__ = ["info", "rename"]
