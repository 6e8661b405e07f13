"""Core value types."""

from klaw_randtool.types.result import Err, Ok, Result

__all__ = ['Err', 'Ok', 'Result']
