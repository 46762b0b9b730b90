"""Errors that capability prober may raise (configuration ones, probe failures are not errors)."""

from .missing_encoded_flags import MissingEncodedFlagsError
from .missing_output_directory import MissingOutputDirectoryError
from .output_directory_not_writable import OutputDirectoryNotWritableError

__all__ = [
    "MissingEncodedFlagsError",
    "MissingOutputDirectoryError",
    "OutputDirectoryNotWritableError",
]
