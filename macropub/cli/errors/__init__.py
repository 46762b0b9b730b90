from .error_handler import cli_macropub_error_handler

__all__ = ["cli_macropub_error_handler"]
