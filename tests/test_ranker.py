# tests/test_ranker.py
import math

import pytest

from search_server.document import Document, DocumentData, DocumentStatus
from search_server.indexer import Indexer
from search_server.query import parse_query
from search_server.ranker import Ranker


def accept_all(document_id, status, rating):
    return True


@pytest.fixture
def setup_ranker():
    """Three docs mirroring the classic "fluffy white cat" ordering case."""
    idx = Indexer()
    docs = {}
    for docid, words, rating in [
        (11, ["funny", "fluffy", "fox"], 3),
        (12, ["funny", "white", "cat"], 2),
        (13, ["fluffy", "grey", "dog"], 2),
    ]:
        idx.add_document(docid, words)
        docs[docid] = DocumentData(rating=rating, status=DocumentStatus.ACTUAL)
    return Ranker(idx, docs)


def test_idf_is_natural_log(setup_ranker):
    assert setup_ranker.idf("fluffy") == pytest.approx(math.log(3 / 2))
    assert setup_ranker.idf("cat") == pytest.approx(math.log(3))


def test_score_sums_tf_idf(setup_ranker):
    scores = setup_ranker.score(parse_query("fluffy white cat"), accept_all)
    assert scores[12] == pytest.approx(2 * (1 / 3) * math.log(3))
    assert scores[11] == pytest.approx((1 / 3) * math.log(1.5))
    assert scores[13] == pytest.approx(scores[11])


def test_unknown_terms_contribute_nothing(setup_ranker):
    assert setup_ranker.score(parse_query("parrot"), accept_all) == {}


def test_rank_ties_broken_by_rating(setup_ranker):
    """11 and 13 have equal relevance; 11 has the higher rating."""
    ranked = setup_ranker.rank(parse_query("fluffy white cat"), accept_all)
    assert [d.id for d in ranked] == [12, 11, 13]
    assert [d.rating for d in ranked] == [2, 3, 2]


def test_minus_word_excludes_even_filtered_docs(setup_ranker):
    """Exclusion applies to every posting of the minus-word."""
    only_12 = lambda document_id, status, rating: document_id == 12
    assert setup_ranker.rank(parse_query("funny -fox"), only_12)[0].id == 12
    assert setup_ranker.rank(parse_query("funny -white"), only_12) == []


def test_predicate_filters_candidates(setup_ranker):
    high = lambda document_id, status, rating: rating > 2
    assert [d.id for d in setup_ranker.rank(parse_query("fluffy"), high)] == [11]


def test_rank_truncates_to_topk():
    idx = Indexer()
    docs = {}
    for docid in range(10):
        idx.add_document(docid, ["cat"] + ["pad"] * docid)
        docs[docid] = DocumentData(rating=0, status=DocumentStatus.ACTUAL)
    idx.add_document(100, ["dog"])
    docs[100] = DocumentData(rating=0, status=DocumentStatus.ACTUAL)

    ranked = Ranker(idx, docs, topk=5).rank(parse_query("cat"), accept_all)
    assert [d.id for d in ranked] == [0, 1, 2, 3, 4], "higher tf should rank first"


def test_near_equal_relevance_uses_rating():
    """Relevance gap under epsilon counts as a tie."""
    ranker = Ranker(Indexer(), {}, epsilon=1e-6)
    a = Document(id=1, relevance=0.5, rating=1)
    b = Document(id=2, relevance=0.5 + 1e-7, rating=9)
    c = Document(id=3, relevance=0.5 + 1e-3, rating=0)
    assert ranker._compare(a, b) > 0
    assert ranker._compare(b, a) < 0
    assert ranker._compare(c, b) < 0
