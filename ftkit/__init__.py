"""Small utility toolkit: characters, buffers, strings, lists, printf-style formatting, line reading and pipelines."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "output", "convert", "strings", "lists", "printf", "lines", "pipex"]