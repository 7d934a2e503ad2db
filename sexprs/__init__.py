"""Values, symbols, cons cells and list operations for a minimal lisp dialect, with a naive code formatter."""

__version__ = "0.0.5"