# search_server/request_queue.py
"""
Sliding-window log of search requests.

Wraps SearchServer.find_top_documents() and keeps one record per request for
the last MINUTES_IN_DAY requests, counting how many of them returned nothing.
The server is borrowed, not owned: the queue only reads from it.
"""

from collections import deque

from search_server.config import MINUTES_IN_DAY
from search_server.document import DocumentStatus


class RequestQueue:
    def __init__(self, search_server, window: int = MINUTES_IN_DAY):
        self.search_server = search_server
        self.window = window
        self.requests = deque()   # True = request returned no documents
        self.no_result_requests = 0

    def add_find_request(self, raw_query: str, status_or_predicate=DocumentStatus.ACTUAL):
        """
        Run the query and record the outcome. Query errors propagate and
        nothing is recorded for them.
        """
        results = self.search_server.find_top_documents(raw_query, status_or_predicate)

        if len(self.requests) >= self.window:
            if self.requests.popleft():
                self.no_result_requests -= 1

        is_empty = not results
        self.requests.append(is_empty)
        if is_empty:
            self.no_result_requests += 1
        return results

    def get_no_result_requests(self) -> int:
        return self.no_result_requests

    def __len__(self) -> int:
        return len(self.requests)
