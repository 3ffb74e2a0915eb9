"""Rule string tokenizer.

Grammar: ``clause (";" clause)*`` where ``clause := predicate ":" argument``.
Only the first ``:`` of a clause separates predicate from argument.
"""

import logging

from ..errors import MalformedClauseError
from ..models import RuleClause

logger = logging.getLogger(__name__)

CLAUSE_SEPARATOR = ";"
KEY_VALUE_SEPARATOR = ":"


def tokenize(raw: str) -> list[str]:
    """Split a rule string into clauses.

    Empty segments are kept so that they fail clause validation downstream.
    """
    return raw.split(CLAUSE_SEPARATOR)


def split_clause(text: str, field: str | None = None) -> RuleClause:
    """Split one clause into predicate name and argument.

    Raises:
        MalformedClauseError: If the clause has no separator or no predicate name
    """
    name, separator, argument = text.strip().partition(KEY_VALUE_SEPARATOR)
    if not separator or not name:
        logger.debug(f"Malformed clause {text!r} on field {field}")
        raise MalformedClauseError(field)
    return RuleClause(name=name, argument=argument)


def parse_rules(raw: str, field: str | None = None) -> list[RuleClause | MalformedClauseError]:
    """Tokenize a rule string into clauses, keeping malformed ones in place.

    Used by callers that want to report on every clause rather than stop at
    the first bad one.
    """
    results: list[RuleClause | MalformedClauseError] = []
    for text in tokenize(raw):
        try:
            results.append(split_clause(text, field))
        except MalformedClauseError as e:
            results.append(e)
    return results
