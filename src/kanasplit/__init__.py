from kanasplit.categories import COMPACT_CATEGORIES, FULL_CATEGORIES, Category, Mode
from kanasplit.classifier import classify, classify_label
from kanasplit.config import TokenizeOptions
from kanasplit.grouper import Token, tokenize, tokenize_with_options

__all__ = [
    # API
    "classify",
    "classify_label",
    "tokenize",
    "tokenize_with_options",
    # Types
    "Category",
    "Mode",
    "Token",
    "TokenizeOptions",
    "COMPACT_CATEGORIES",
    "FULL_CATEGORIES",
]
