"""
bench_search.py

Quick-and-dirty latency benchmark for SearchServer.find_top_documents().
Builds a synthetic corpus from a seeded vocabulary, samples queries from it
(optionally with a minus-word) and reports avg/p50/p95/max latency.

Run examples:
  python bench_search.py
  python bench_search.py --docs 20000 --num-queries 500 --minus
  python bench_search.py --queries queries.txt
"""

import argparse
import random
import statistics
import time

from search_server.searcher import SearchServer

STOP_WORDS = "a an and in of the with"


def load_queries(path):
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def make_vocabulary(size=2000, seed=1234):
    rng = random.Random(seed)
    letters = "abcdefghijklmnopqrstuvwxyz"
    vocab = set()
    while len(vocab) < size:
        vocab.add("".join(rng.choice(letters) for _ in range(rng.randint(3, 8))))
    return sorted(vocab)


def build_server(n_docs=5000, words_per_doc=20, vocab=None, seed=1234):
    vocab = vocab or make_vocabulary(seed=seed)
    rng = random.Random(seed)
    server = SearchServer(STOP_WORDS)
    stop = STOP_WORDS.split()
    for docid in range(n_docs):
        words = [rng.choice(vocab) for _ in range(words_per_doc)]
        words += rng.sample(stop, 2)
        ratings = [rng.randint(-10, 10) for _ in range(rng.randint(0, 4))]
        server.add_document(docid, " ".join(words), ratings=ratings)
    return server


def sample_queries(vocab, n=100, terms_per_q=3, minus=False, seed=1234):
    rng = random.Random(seed)
    queries = []
    for _ in range(n):
        qs = rng.sample(vocab, terms_per_q + (1 if minus else 0))
        if minus:
            qs[-1] = "-" + qs[-1]
        queries.append(" ".join(qs))
    return queries


def bench(server, queries):
    times = []
    for q in queries:
        t0 = time.perf_counter()
        _ = server.find_top_documents(q)
        dt = (time.perf_counter() - t0) * 1000  # ms
        times.append(dt)
    return {
        "n": len(times),
        "avg_ms": statistics.mean(times),
        "p50_ms": statistics.median(times),
        "p95_ms": statistics.quantiles(times, n=20)[18] if len(times) >= 20 else max(times),
        "max_ms": max(times),
    }


def main(args):
    vocab = make_vocabulary()
    t0 = time.perf_counter()
    server = build_server(n_docs=args.docs, words_per_doc=args.words_per_doc, vocab=vocab)
    print(f"[Bench] Indexed {server.get_document_count()} docs in {time.perf_counter() - t0:.2f}s")

    if args.queries:
        queries = load_queries(args.queries)
    else:
        queries = sample_queries(vocab, n=args.num_queries, terms_per_q=args.terms_per_query, minus=args.minus)

    stats = bench(server, queries)
    print(f"Queries={stats['n']}  "
          f"avg={stats['avg_ms']:.2f}ms  p50={stats['p50_ms']:.2f}ms  "
          f"p95={stats['p95_ms']:.2f}ms  max={stats['max_ms']:.2f}ms")


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--queries", type=str, default=None, help="file with one query per line")
    ap.add_argument("--docs", type=int, default=5000, help="number of synthetic documents")
    ap.add_argument("--words-per-doc", type=int, default=20, help="non-stop words per document")
    ap.add_argument("--num-queries", type=int, default=200, help="number of sampled queries if --queries not provided")
    ap.add_argument("--terms-per-query", type=int, default=3, help="how many plus-terms per sampled query")
    ap.add_argument("--minus", action="store_true", help="append one minus-word to each sampled query")
    args = ap.parse_args()
    main(args)
