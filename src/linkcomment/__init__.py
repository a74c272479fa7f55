"""linkcomment - clickable ``[description](path@symbol)`` links in source comments."""

__version__ = "0.1.0"
