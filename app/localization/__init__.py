"""Translation resource runtime.

Key-based message lookup, interpolation, pluralization, lazy bundle
loading and RTL-aware formatting over per-locale message catalogs.
"""
