from .report import describe_wordlist, pretty_summary
from .io import read_lines, load_words

__all__ = ["describe_wordlist", "pretty_summary", "read_lines", "load_words"]
