"""Terminal presentation helpers."""

from draftval.ui.formatters import describe_error, format_error_tree

__all__ = ["describe_error", "format_error_tree"]
