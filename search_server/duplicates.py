# search_server/duplicates.py
"""
Duplicate detection on top of SearchServer.get_word_frequencies().

Two documents are duplicates when they contain the same *set* of non-stop
words: word order and repeat counts are ignored. From each group of
duplicates the lowest document id survives; all others are removed.
"""


def find_duplicates(search_server) -> list[int]:
    """
    Ids that remove_duplicates() would drop, ascending.
    """
    keeper_by_words: dict[frozenset[str], int] = {}
    duplicates = []

    for document_id in sorted(search_server):
        words = frozenset(search_server.get_word_frequencies(document_id))
        if words in keeper_by_words:
            duplicates.append(document_id)
        else:
            keeper_by_words[words] = document_id

    return duplicates


def remove_duplicates(search_server) -> list[int]:
    """
    Remove duplicate documents from the server, keeping the lowest id of
    each group. Returns the removed ids in ascending order.
    """
    duplicates = find_duplicates(search_server)
    for document_id in duplicates:
        search_server.remove_document(document_id)
        print(f"Found duplicate document id {document_id}")
    return duplicates
