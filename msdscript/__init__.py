"""A small expression language: parser, interpreter, pretty printer and Tk window."""

__version__ = "1.0.0"