"""An interactive shell for single commands and file-to-file pipelines."""

__version__ = "0.1.0"