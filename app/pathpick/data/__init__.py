"""Bundled data files for pathpick."""
