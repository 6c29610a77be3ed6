from collections import OrderedDict

CACHE_DISABLED = False


def lookup_has_prefix(lookup, digits):
    """True if some word may start with ``digits``; lookups without ``has_prefix`` never rule it out."""
    has_prefix = getattr(lookup, "has_prefix", None)
    if has_prefix is None:
        return True
    return has_prefix(digits)


# LRU cache using OrderedDict
MAX_CACHE_SIZE = 50000
class LRUCache(OrderedDict):
    def __init__(self, maxsize=MAX_CACHE_SIZE, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.maxsize = maxsize
    def __getitem__(self, key):
        value = super().__getitem__(key)
        self.move_to_end(key)
        return value
    def __setitem__(self, key, value):
        if key in self:
            self.move_to_end(key)
        super().__setitem__(key, value)
        if len(self) > self.maxsize:
            oldest = next(iter(self))
            del self[oldest]


class CachedLookup:
    """Memoise ``words_for`` of any dictionary lookup.

    The same digit segments are looked up over and over by the partition
    search and its lookahead probe, across numbers too. When CACHE_DISABLED is
    True, every call goes straight to the wrapped lookup without touching the
    counters.
    """

    def __init__(self, lookup, maxsize=MAX_CACHE_SIZE):
        self.lookup = lookup
        self.cache = LRUCache(maxsize)
        self.hits = 0
        self.misses = 0

    def words_for(self, digits):
        if CACHE_DISABLED:
            return self.lookup.words_for(digits)
        if digits in self.cache:
            self.hits += 1
            return self.cache[digits]
        self.misses += 1
        words = tuple(self.lookup.words_for(digits))
        self.cache[digits] = words
        return words

    def has_prefix(self, digits):
        return lookup_has_prefix(self.lookup, digits)

    def clear(self):
        self.cache.clear()
        self.hits = 0
        self.misses = 0

    def print_cache_summary(self):
        print(f"[CACHE SUMMARY] Cached digit segments: {len(self.cache)}")
        print(f"[CACHE SUMMARY] Actual cache hits: {self.hits}")
        print(f"[CACHE SUMMARY] Actual cache misses: {self.misses}")
