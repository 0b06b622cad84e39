# search_server/paginator.py
"""
Split an ordered result list into fixed-size pages for display.
Pure consumer of find_top_documents() output; never touches the index.
"""

from search_server.errors import InvalidArgumentError


class Page:
    """A contiguous slice of results."""

    def __init__(self, items):
        self.items = list(items)

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, i):
        return self.items[i]

    def __str__(self) -> str:
        return "".join(str(item) for item in self.items)


class Paginator:
    """
    Pages of at most `page_size` items; the last page holds the remainder.

    Typical usage:
        for page in Paginator(results, 2):
            print(page)
            print("Page break")
    """

    def __init__(self, items, page_size: int):
        if page_size < 1:
            raise InvalidArgumentError(f"Page size must be positive, got {page_size}")
        items = list(items)
        self.page_size = page_size
        self.pages = [
            Page(items[left:left + page_size]) for left in range(0, len(items), page_size)
        ]

    def __iter__(self):
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

    def __getitem__(self, i) -> Page:
        return self.pages[i]


def paginate(items, page_size: int) -> Paginator:
    return Paginator(items, page_size)
