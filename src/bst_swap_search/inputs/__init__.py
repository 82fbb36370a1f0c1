"""Input parsing and validation."""

from bst_swap_search.inputs.parser import InputValidationError, parse

__all__ = ["InputValidationError", "parse"]
