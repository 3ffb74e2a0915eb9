"""Rule parsing and evaluation engine.

Record orchestration sits on top of the tokenizer, the predicate syntax
validator, the field dispatcher and the per-type value evaluators.
"""

from .dispatch import dispatch
from .evaluators import eval_int, eval_text
from .syntax import parse_int, validate_syntax
from .tokenizer import parse_rules, split_clause, tokenize
from .validator import Validator, default_validator, validate

__all__ = [
    "Validator",
    "validate",
    "default_validator",
    "tokenize",
    "split_clause",
    "parse_rules",
    "validate_syntax",
    "parse_int",
    "dispatch",
    "eval_text",
    "eval_int",
]
