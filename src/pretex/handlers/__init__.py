"""Built-in block handlers registered by :class:`~pretex.adapters.latex.LaTeXRenderer`."""
