"""
search_server/indexer.py

In-memory inverted index with a forward (per-document) view.

    index:     term  -> {docid: term_frequency}
    doc_freqs: docid -> {term: term_frequency}

Term frequency is normalized: occurrences of the term in the document divided
by the number of retained (non-stop) tokens in that document.

The forward view makes removal O(terms in doc) instead of a full index scan,
and backs get_word_frequencies() for duplicate detection.
"""

from collections import defaultdict


class Indexer:
    """
    Postings store. Knows nothing about stop words or validation; callers
    hand it the already-filtered token list of a document.

    Invariant: a term is a key of `index` iff at least one indexed document
    contains it. Empty posting lists are pruned on removal.
    """

    def __init__(self):
        self.index = defaultdict(dict)
        self.doc_freqs: dict[int, dict[str, float]] = {}

    def add_document(self, docid: int, words: list[str]):
        """
        Index one document.

        Args:
            docid: document id, must not be indexed yet
            words: retained tokens of the document, in order (repeats count)
        """
        freqs: dict[str, float] = {}
        if words:
            inv_word_count = 1.0 / len(words)
            for w in words:
                freqs[w] = freqs.get(w, 0.0) + inv_word_count

        for term, tf in freqs.items():
            self.index[term][docid] = tf
        self.doc_freqs[docid] = freqs

    def remove_document(self, docid: int) -> bool:
        """
        Drop every posting of docid. Returns False if docid was not indexed.
        """
        freqs = self.doc_freqs.pop(docid, None)
        if freqs is None:
            return False
        for term in freqs:
            postings = self.index[term]
            del postings[docid]
            if not postings:
                del self.index[term]
        return True

    def get_postings(self, term: str) -> dict[int, float]:
        """
        Posting list of a term, or an empty dict if the term is not indexed.
        Does not create an entry for unknown terms.
        """
        return self.index.get(term, {})

    def document_frequency(self, term: str) -> int:
        return len(self.index.get(term, {}))

    def get_word_frequencies(self, docid: int) -> dict[str, float]:
        return self.doc_freqs.get(docid, {})

    def __contains__(self, term: str) -> bool:
        return term in self.index

    def __len__(self) -> int:
        return len(self.index)
