"""minclude: remove #include directives already satisfied transitively."""

__version__ = "0.3.0"
