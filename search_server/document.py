# search_server/document.py
"""
Document metadata and the scored result type returned by searches.
"""

from dataclasses import dataclass
from enum import Enum


class DocumentStatus(Enum):
    ACTUAL = 0
    IRRELEVANT = 1
    BANNED = 2
    REMOVED = 3


@dataclass(frozen=True)
class DocumentData:
    """Catalog entry kept per indexed document."""

    rating: int
    status: DocumentStatus


@dataclass
class Document:
    """
    One ranked search hit.
    - id: caller-chosen document id
    - relevance: summed TF-IDF over the query's plus-terms
    - rating: stored average rating of the document
    """

    id: int
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return (
            f"{{ document_id = {self.id}, "
            f"relevance = {self.relevance:g}, "
            f"rating = {self.rating} }}"
        )


def compute_average_rating(ratings) -> int:
    """
    Integer mean of the ratings, truncated toward zero. 0 for no ratings.
    """
    ratings = list(ratings)
    if not ratings:
        return 0
    total = sum(ratings)
    avg = abs(total) // len(ratings)
    return avg if total >= 0 else -avg
