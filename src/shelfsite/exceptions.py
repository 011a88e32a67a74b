"""Centralized exceptions for the Shelfsite application."""


class ShelfsiteError(Exception):
    """Base exception for all Shelfsite errors."""
