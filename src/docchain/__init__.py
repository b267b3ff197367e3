"""docchain - document version chains with restore and navigation."""

__version__ = "0.1.0"
