from collections import OrderedDict


class PageTable:
    """
    Resident pages in recency order, most recently used first.

    OrderedDict gives O(1) membership, move_to_end() promotes a page and
    the last key is always the LRU page.
    """

    def __init__(self):
        self.entries = OrderedDict()  # page_num -> None, MRU first

    def __len__(self):
        return len(self.entries)

    def __contains__(self, page_num):
        return page_num in self.entries

    def __iter__(self):
        return iter(self.entries)

    def move_to_front(self, page_num):
        self.entries.move_to_end(page_num, last=False)

    def push_front(self, page_num):
        if page_num in self.entries:
            raise ValueError(f"Page {page_num} is already resident")
        self.entries[page_num] = None
        self.entries.move_to_end(page_num, last=False)

    def lru_page(self):
        if not self.entries:
            return None
        return next(reversed(self.entries))

    def remove(self, page_num):
        del self.entries[page_num]
