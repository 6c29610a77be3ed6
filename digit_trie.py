# digit_trie.py
# Trie keyed by digit strings: each word sits at the node reached by its
# digit encoding, so one walk answers "which words spell these digits".

from typing import Dict, Iterable, List, Optional, Tuple

from digit_mapping import word_to_digits


class DigitTrie:
    """
    Dictionary lookup over digit-encoded words:
      - DigitTrie.build(words) -> DigitTrie
      - words_for(digits) -> tuple of words encoding exactly to digits
      - has_prefix(digits) -> bool
    Internals:
      nodes: List[{'words': List[str], 'edges': Dict[str, int]}]
      node 0 is the root.
    """

    __slots__ = ("_nodes", "_size")

    def __init__(self, nodes: List[Dict], size: int = 0):
        # nodes[i] = {'words': [literal words], 'edges': {digit: child_index}}
        self._nodes = nodes
        self._size = size

    # ---------- Public API ----------
    @classmethod
    def build(cls, words: Iterable[str]) -> "DigitTrie":
        """
        Build a trie from dictionary words. Words are stored verbatim; only their
        letters decide where they go. Words without letters are dropped.
        """
        nodes: List[Dict[str, object]] = [{"words": [], "edges": {}}]  # root at 0
        size = 0

        def add_word(digits: str, w: str) -> bool:
            cur = 0
            edges0 = nodes[cur]["edges"]
            for d in digits:
                nxt = edges0.get(d)
                if nxt is None:
                    nodes.append({"words": [], "edges": {}})
                    nxt = len(nodes) - 1
                    edges0[d] = nxt
                cur = nxt
                edges0 = nodes[cur]["edges"]
            bucket = nodes[cur]["words"]
            if w in bucket:
                return False
            bucket.append(w)
            return True

        for w in words:
            if not w:
                continue
            digits = word_to_digits(w)
            if digits and add_word(digits, w):
                size += 1

        return cls(nodes, size)

    def words_for(self, digits: str) -> Tuple[str, ...]:
        """Words whose letters encode to exactly ``digits``, in insertion order."""
        idx = self._walk(digits)
        if idx is None or not digits:
            return ()
        return tuple(self._nodes[idx]["words"])

    def has_prefix(self, digits: str) -> bool:
        """True if some word's encoding starts with ``digits``."""
        return self._walk(digits) is not None

    def __len__(self) -> int:
        return self._size

    # ---------- Helpers ----------
    def _walk(self, digits: str) -> Optional[int]:
        """Return node index after consuming digits, or None if no such path."""
        idx = 0
        nodes = self._nodes
        for d in digits:
            edges: Dict[str, int] = nodes[idx]["edges"]  # type: ignore[assignment]
            nxt = edges.get(d)
            if nxt is None:
                return None
            idx = nxt
        return idx
