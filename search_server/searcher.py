# search_server/searcher.py
from search_server.document import DocumentData, DocumentStatus, compute_average_rating
from search_server.errors import DocumentNotFoundError, InvalidArgumentError
from search_server.indexer import Indexer
from search_server.parser import is_valid_word, make_stop_words, split_into_words
from search_server.query import parse_query
from search_server.ranker import Ranker


class SearchServer:
    """
    In-memory document search server.

    - Owns the stop-word set, the inverted index (Indexer) and the document
      catalog (docid -> rating/status, kept in insertion order).
    - Every call validates its input before touching any state, so a failed
      add_document leaves the server exactly as it was.
    - Not thread-safe: callers serialize writes themselves.
    """

    def __init__(self, stop_words=""):
        self.stop_words = make_stop_words(stop_words)
        self.indexer = Indexer()
        # dicts keep insertion order, which doubles as the document id order
        self.documents: dict[int, DocumentData] = {}
        self.ranker = Ranker(self.indexer, self.documents)

    def _split_into_words_no_stop(self, text: str) -> list[str]:
        words = []
        for word in split_into_words(text):
            if word in self.stop_words:
                continue
            if not is_valid_word(word):
                raise InvalidArgumentError(f"Word {word!r} contains invalid characters")
            words.append(word)
        return words

    def add_document(self, document_id: int, document: str,
                     status: DocumentStatus = DocumentStatus.ACTUAL, ratings=()):
        """
        Index a document.

        Raises InvalidArgumentError for a negative or already used id, or if
        any non-stop word of the text contains a control character.
        """
        if document_id < 0:
            raise InvalidArgumentError(f"Document id {document_id} is negative")
        if document_id in self.documents:
            raise InvalidArgumentError(f"Document id {document_id} already exists")

        words = self._split_into_words_no_stop(document)

        self.indexer.add_document(document_id, words)
        self.documents[document_id] = DocumentData(
            rating=compute_average_rating(ratings), status=status
        )

    def remove_document(self, document_id: int):
        """Remove a document and all of its postings. Unknown ids are ignored."""
        if document_id not in self.documents:
            return
        self.indexer.remove_document(document_id)
        del self.documents[document_id]

    @staticmethod
    def _as_predicate(status_or_predicate):
        if isinstance(status_or_predicate, DocumentStatus):
            status = status_or_predicate
            return lambda document_id, document_status, rating: document_status == status
        if callable(status_or_predicate):
            return status_or_predicate
        raise TypeError(
            f"expected DocumentStatus or predicate, got {type(status_or_predicate)}"
        )

    def find_top_documents(self, raw_query: str, status_or_predicate=DocumentStatus.ACTUAL):
        """
        Rank documents against a query.

        Args:
            raw_query: space-separated words; "-word" excludes documents
            status_or_predicate: a DocumentStatus to match exactly, or a
                callable (document_id, status, rating) -> bool

        Returns:
            list[Document] sorted by relevance (then rating), at most
            MAX_RESULT_DOCUMENT_COUNT long
        """
        predicate = self._as_predicate(status_or_predicate)
        query = parse_query(raw_query, self.stop_words)
        return self.ranker.rank(query, predicate)

    def match_document(self, raw_query: str, document_id: int):
        """
        Plus-words of the query found in the document (sorted), and its status.
        The word list is empty if any minus-word occurs in the document.
        """
        query = parse_query(raw_query, self.stop_words)
        data = self.documents.get(document_id)
        if data is None:
            raise DocumentNotFoundError(f"Document id {document_id} not found")

        freqs = self.indexer.get_word_frequencies(document_id)
        if any(word in freqs for word in query.minus_words):
            return [], data.status
        matched = sorted(word for word in query.plus_words if word in freqs)
        return matched, data.status

    def get_word_frequencies(self, document_id: int) -> dict[str, float]:
        return dict(self.indexer.get_word_frequencies(document_id))

    def get_document_count(self) -> int:
        return len(self.documents)

    def get_document_id(self, index: int) -> int:
        """Document id at ordinal position `index` (insertion order)."""
        if not 0 <= index < len(self.documents):
            raise DocumentNotFoundError(f"No document at position {index}")
        return list(self.documents)[index]

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self):
        return iter(self.documents)

    def __contains__(self, document_id) -> bool:
        return document_id in self.documents
