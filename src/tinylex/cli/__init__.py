"""
tinylex Command-Line Interface
==============================

- **tlex**: dump the token stream of a source file or standard input

The tool is a Click-based CLI application sharing the exit codes and
error handling defined in tinylex.cli.errors.
"""

__all__ = ["tlex"]
