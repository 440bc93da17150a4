"""
Command-line interface for running descent optimizers.
"""

from .commands import CommandHandler, load_request_file

__all__ = ["CommandHandler", "load_request_file"]
