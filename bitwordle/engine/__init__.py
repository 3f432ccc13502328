from .codec import Word, Mask, WordError, WordLengthError, WordCharError, encode, decode
from .scoring import Pattern, PatternKind, PatternLetter, compute_pattern
from .constraints import apply_pattern, fold_letters
from .lexicon import Lexicon, DictionaryError
from .universe import Universe, condense_universe, rescan_universe
from .validation import parse_guess, validate_guess

__all__ = [
    "Word", "Mask", "WordError", "WordLengthError", "WordCharError", "encode", "decode",
    "Pattern", "PatternKind", "PatternLetter", "compute_pattern",
    "apply_pattern", "fold_letters",
    "Lexicon", "DictionaryError",
    "Universe", "condense_universe", "rescan_universe",
    "parse_guess", "validate_guess",
]
