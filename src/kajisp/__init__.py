"""Kajisp - a small LISP-like language: tokenizer, reader and eager tree-walking evaluator."""

# Main API
from kajisp.kajisp import Kajisp

# Exceptions
from kajisp.kajisp_error import (
    KajispError, KajispTokenError, KajispParseError, KajispEvalError, KajispExit, ErrorMessageBuilder
)

# Value types
from kajisp.kajisp_value import (
    KajispValue, KajispNumber, KajispBoolean, KajispSymbol, KajispString, KajispList, KajispNil,
    parse_number, format_number
)

# Lower-level components (for advanced usage)
from kajisp.kajisp_token import KajispToken
from kajisp.kajisp_tokenizer import KajispTokenizer
from kajisp.kajisp_parser import KajispParser
from kajisp.kajisp_evaluator import KajispEvaluator


__all__ = [
    # Main API
    "Kajisp",

    # Exceptions
    "KajispError", "KajispTokenError", "KajispParseError", "KajispEvalError", "KajispExit",
    "ErrorMessageBuilder",

    # Value types
    "KajispValue", "KajispNumber", "KajispBoolean", "KajispSymbol", "KajispString", "KajispList", "KajispNil",
    "parse_number", "format_number",

    # Lower-level components
    "KajispToken", "KajispTokenizer", "KajispParser", "KajispEvaluator"
]
