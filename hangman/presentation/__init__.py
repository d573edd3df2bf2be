from .format import format_guesses, format_family_counts

__all__ = ["format_guesses", "format_family_counts"]
