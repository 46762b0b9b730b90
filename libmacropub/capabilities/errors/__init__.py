"""Errors of capabilities persistence."""

from .malformed_capabilities_file import MalformedCapabilitiesFileError

__all__ = ["MalformedCapabilitiesFileError"]
