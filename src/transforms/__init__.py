"""Text transforms for survey category metadata.

Each module is a pure, single-pass function over selection text.
"""
