"""Routing — compiled locale-aware template tables with first-match matching.

Templates are compiled and validated when ``Navigation`` is built and are
immutable lookup structures afterwards.
"""
