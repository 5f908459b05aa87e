"""Run a chain of commands between an input file and an output file, with here-document support."""

__version__ = "0.1.0"
__all__ = ["cli", "errors", "lines", "paths", "pipeline", "redirect", "text"]