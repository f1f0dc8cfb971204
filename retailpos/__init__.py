"""retailpos - point-of-sale inventory and sales bookkeeping."""

__version__ = "1.0.0"
