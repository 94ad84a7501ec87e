"""Terabox domain handling."""
from .resolver import DomainResolver

__all__ = ["DomainResolver"]
