# search_server/cli.py
"""
Command-line driver: load a TSV corpus, optionally drop duplicates, run
queries through a RequestQueue and print paginated results.

Run examples (from project root):
  python -m search_server.cli --stop-words "and with" --query "curly rat"
  python -m search_server.cli --corpus data/sample_docs.tsv --dedupe --query "funny pet" --match 2
"""

import argparse
import os
import sys
from contextlib import nullcontext

from search_server import profkit
from search_server.config import CORPUS_PATH, DEFAULT_PAGE_SIZE
from search_server.document import DocumentStatus
from search_server.duplicates import remove_duplicates
from search_server.errors import DocumentNotFoundError, InvalidArgumentError
from search_server.paginator import paginate
from search_server.parser import Parser
from search_server.request_queue import RequestQueue
from search_server.searcher import SearchServer


def load_corpus(server: SearchServer, path: str, limit: int | None = None):
    """
    Add every well-formed document of a TSV corpus to the server.
    Documents the server rejects are reported and skipped.

    Returns:
        (loaded:int, skipped:int)
    """
    parser = Parser()
    loaded = skipped = 0
    for doc_id, status, ratings, text in parser.iter_docs(path, limit=limit):
        try:
            server.add_document(doc_id, text, status, ratings)
        except InvalidArgumentError as e:
            print(f"[Loader] Skipping document {doc_id}: {e}")
            profkit.tick("documents_skipped")
            skipped += 1
            continue
        loaded += 1
    print(f"[Loader] Loaded {loaded} docs from {path} (skipped {skipped})")
    return loaded, skipped


def print_pages(results, page_size: int):
    for page in paginate(results, page_size):
        print(page)
        print("Page break")


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="In-memory TF-IDF document search server.")
    ap.add_argument("--corpus", default=CORPUS_PATH, help="TSV corpus: id, status, ratings, text")
    ap.add_argument("--stop-words", default="", help="space-separated stop words")
    ap.add_argument("--query", action="append", default=[], help="query to run (repeatable)")
    ap.add_argument("--status", default="ACTUAL", choices=list(DocumentStatus.__members__),
                    help="only return documents with this status")
    ap.add_argument("--page-size", type=int, default=DEFAULT_PAGE_SIZE, help="results per page")
    ap.add_argument("--match", type=int, default=None, help="document id to match each query against")
    ap.add_argument("--dedupe", action="store_true", help="remove duplicate documents after loading")
    ap.add_argument("--limit", type=int, default=None, help="load at most this many documents")
    ap.add_argument("--timing", action="store_true", help="print operation timings to stderr")
    return ap


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    if not os.path.exists(args.corpus):
        print(f"Corpus file not found: {args.corpus}", file=sys.stderr)
        return 1

    try:
        server = SearchServer(args.stop_words)
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    load_corpus(server, args.corpus, limit=args.limit)

    if args.dedupe:
        print(f"[Dedupe] Before duplicates removed: {server.get_document_count()}")
        remove_duplicates(server)
        print(f"[Dedupe] After duplicates removed: {server.get_document_count()}")

    status = DocumentStatus[args.status]
    queue = RequestQueue(server)
    for q in args.query:
        print(f"\nQuery: '{q}'")
        try:
            timer = profkit.log_duration(f"Search '{q}'") if args.timing else nullcontext()
            with profkit.timeit("find_top_documents"), timer:
                results = queue.add_find_request(q, status)
            if not results:
                print("No matching documents found.")
            else:
                print_pages(results, args.page_size)

            if args.match is not None:
                words, doc_status = server.match_document(q, args.match)
                print(f"{{ document_id = {args.match}, status = {doc_status.name}, "
                      f"words = {' '.join(words)} }}")
        except InvalidArgumentError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        except DocumentNotFoundError as e:
            print(f"Error: {e.args[0]}", file=sys.stderr)
            return 2

    print(f"\nTotal empty requests: {queue.get_no_result_requests()}")
    if args.timing:
        profkit.report()
    return 0


if __name__ == "__main__":
    sys.exit(main())
