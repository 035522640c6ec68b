"""Evaluate arithmetic expressions with user-defined constants, functions and operators."""

__version__ = "1.0.0"