from .validator import validate_wordlists, pretty_summary
from .dictionary import WordDictionary, DictionaryError, load_wordlist

__all__ = ["validate_wordlists", "pretty_summary", "WordDictionary", "DictionaryError",
           "load_wordlist"]
