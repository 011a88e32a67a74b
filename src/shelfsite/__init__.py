"""Shelfsite: provisioning and build tooling for a curated book-recommendation microsite."""

__version__ = "1.0.0"
