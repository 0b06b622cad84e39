# search_server/ranker.py
import math
from functools import cmp_to_key

from search_server.config import MAX_RESULT_DOCUMENT_COUNT, RELEVANCE_EPSILON
from search_server.document import Document


class Ranker:
    """
    TF-IDF ranker over an Indexer and a document catalog.

    Requirements / assumptions:
    - `indexer` exposes get_postings(term) -> {docid: tf} and
      document_frequency(term)
    - `documents` is a mapping: docid -> DocumentData (rating, status)
    - both are shared with the owning SearchServer and read only here
    """

    def __init__(self, indexer, documents, topk=MAX_RESULT_DOCUMENT_COUNT, epsilon=RELEVANCE_EPSILON):
        self.indexer = indexer
        self.documents = documents
        self.topk = topk
        self.epsilon = epsilon

    def idf(self, term: str) -> float:
        """
        ln(N / df). Only call for terms with at least one posting.
        """
        return math.log(len(self.documents) / self.indexer.document_frequency(term))

    def score(self, query, predicate):
        """
        Accumulate relevance for every document holding a plus-term and
        passing predicate(docid, status, rating); then drop every document
        holding a minus-term, whether or not it passed the predicate.

        Returns:
            dict[int, float] : docid -> relevance
        """
        relevance: dict[int, float] = {}

        for term in query.plus_words:
            postings = self.indexer.get_postings(term)
            if not postings:
                continue
            idf = self.idf(term)
            for docid, tf in postings.items():
                data = self.documents[docid]
                if predicate(docid, data.status, data.rating):
                    relevance[docid] = relevance.get(docid, 0.0) + tf * idf

        for term in query.minus_words:
            for docid in self.indexer.get_postings(term):
                relevance.pop(docid, None)

        return relevance

    def _compare(self, lhs: Document, rhs: Document) -> int:
        # relevance desc; near-equal relevance falls back to rating desc
        if abs(lhs.relevance - rhs.relevance) < self.epsilon:
            return (rhs.rating > lhs.rating) - (rhs.rating < lhs.rating)
        return -1 if lhs.relevance > rhs.relevance else 1

    def rank(self, query, predicate) -> list[Document]:
        """
        Score, sort and truncate to the top `topk` documents.
        """
        relevance = self.score(query, predicate)
        matched = [
            Document(id=docid, relevance=rel, rating=self.documents[docid].rating)
            for docid, rel in relevance.items()
        ]
        matched.sort(key=cmp_to_key(self._compare))
        return matched[: self.topk]
