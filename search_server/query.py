# search_server/query.py
"""
Query parsing: raw query string -> plus-terms and minus-terms.

    "fluffy -grey cat"  ->  plus={"fluffy", "cat"}, minus={"grey"}

Stop words are dropped from both sets. A bare "-" or a "--" prefix is
rejected; so is any term with control characters.
"""

from dataclasses import dataclass, field

from search_server.errors import InvalidArgumentError
from search_server.parser import split_into_words, is_valid_word


@dataclass
class Query:
    plus_words: set[str] = field(default_factory=set)
    minus_words: set[str] = field(default_factory=set)


def parse_query_word(word: str) -> tuple[str, bool]:
    """
    Strip a single leading '-' and report whether the word is a minus-term.
    Raises InvalidArgumentError for '-' alone or a '--' prefix.
    """
    if not word.startswith("-"):
        return word, False
    if len(word) == 1 or word[1] == "-":
        raise InvalidArgumentError(f"Malformed minus-term {word!r}")
    return word[1:], True


def parse_query(raw_query: str, stop_words=frozenset()) -> Query:
    query = Query()
    for word in split_into_words(raw_query):
        term, is_minus = parse_query_word(word)
        if term in stop_words:
            continue
        if not is_valid_word(term):
            raise InvalidArgumentError(f"Query word {term!r} contains invalid characters")
        if is_minus:
            query.minus_words.add(term)
        else:
            query.plus_words.add(term)
    return query
