"""Agent-friendly ISO-8859-1 file interface."""

from .interface import IsoFileSystem, error_response

__all__ = [
    'IsoFileSystem',
    'error_response',
]
