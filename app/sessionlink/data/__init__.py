"""Bundled data files for sessionlink."""
