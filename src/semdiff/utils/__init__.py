#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared helpers for semdiff parsers, the diff engine and renderers."""
