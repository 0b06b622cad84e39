# search_server/parser.py
"""
Tokenization, stop-word construction and corpus parsing.

The core tokenizer is deliberately minimal:
- split on ASCII space only, drop empty tokens
- no case folding, no punctuation handling
- a token is valid iff it has no control characters (code points < 0x20)

Corpus cleaning (ftfy + html unescape) happens in Parser, *before* text is
handed to the index, so the index itself never normalizes anything.
"""

import html
from ftfy import fix_text

from search_server.document import DocumentStatus
from search_server.errors import InvalidArgumentError


def split_into_words(text: str) -> list[str]:
    """Split on ' ' and drop empty tokens."""
    return [word for word in text.split(" ") if word]


def is_valid_word(word: str) -> bool:
    # A valid word must not contain special characters
    return not any(ord(c) < 0x20 for c in word)


def make_stop_words(stop_words) -> frozenset[str]:
    """
    Build the immutable stop-word set.

    Args:
        stop_words: a space-delimited string, or any iterable of strings

    Empty and space-only entries are dropped. Raises InvalidArgumentError
    if any remaining entry contains a control character.
    """
    if isinstance(stop_words, str):
        candidates = split_into_words(stop_words)
    else:
        candidates = list(stop_words)

    words = set()
    for word in candidates:
        if not word.strip(" "):
            continue
        if not is_valid_word(word):
            raise InvalidArgumentError(f"Stop word {word!r} contains invalid characters")
        words.add(word)
    return frozenset(words)


class Parser:
    """
    Parser for TSV corpora with one document per line:

        <id>\t<status>\t<ratings>\t<text>

    - status: a DocumentStatus name, empty means ACTUAL
    - ratings: space-separated integers, may be empty
    - text: raw document text; mojibake and HTML entities are fixed

    Blank lines and lines starting with '#' are ignored.

    Methods:
        clean(text: str) -> str
        parse_line(line: str) -> (id, status, ratings, text) | None
        iter_docs(path: str, limit: int | None = None)
    """

    def __init__(self):
        pass

    def clean(self, text: str) -> str:
        """
        Fix mojibake (ftfy) and unescape HTML entities.
        Tabs and newlines become plain spaces so the text tokenizes cleanly.
        """
        text = fix_text(html.unescape(text))
        return text.replace("\t", " ").replace("\r", " ").replace("\n", " ")

    def parse_line(self, line: str):
        """
        Parse a single TSV line.
        Returns:
            (doc_id:int, status:DocumentStatus, ratings:list[int], text:str) on success
            None if the line is blank, a comment, or malformed
        """
        line = line.rstrip("\n")
        if not line.strip() or line.startswith("#"):
            return None
        parts = line.split("\t", 3)
        if len(parts) != 4:
            return None

        docid_str, status_str, ratings_str, text = parts
        try:
            doc_id = int(docid_str)
            ratings = [int(r) for r in ratings_str.split()]
        except ValueError:
            return None

        status_str = status_str.strip().upper()
        if not status_str:
            status = DocumentStatus.ACTUAL
        elif status_str in DocumentStatus.__members__:
            status = DocumentStatus[status_str]
        else:
            return None

        return doc_id, status, ratings, self.clean(text)

    def iter_docs(self, path: str, limit: int | None = None):
        """
        Stream parsed documents from a TSV file, skipping malformed lines.

        Yields:
            (doc_id, status, ratings, text)
        """
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            count = 0
            for line in f:
                if limit is not None and count >= limit:
                    break
                parsed = self.parse_line(line)
                if parsed is None:
                    continue
                count += 1
                yield parsed
