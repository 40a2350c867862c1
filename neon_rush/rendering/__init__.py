"""Pygame presentation of run snapshots."""
