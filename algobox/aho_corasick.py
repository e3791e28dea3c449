"""Multi-pattern string search with the Aho-Corasick automaton."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class _Node:
    links: dict[str, _Node] = field(default_factory=dict)
    fail: _Node | None = None
    term: _Node | None = None
    out: int = -1

    @property
    def is_terminal(self) -> bool:
        return self.out >= 0


class AhoCorasick:
    """A trie of words with failure links for finding them all in a text."""

    def __init__(self) -> None:
        self._root = _Node()
        self._words: list[str] = []
        self._built = False

    def add_word(self, word: str) -> None:
        """Add ``word`` to the dictionary."""
        node = self._root
        for char in word:
            child = node.links.get(char)
            if child is None:
                child = _Node(fail=self._root)
                node.links[char] = child
            node = child
        node.out = len(self._words)
        self._words.append(word)
        self._built = False

    def build(self) -> None:
        """Compute failure and dictionary links for the words added so far."""
        queue = deque([self._root])
        while queue:
            node = queue.popleft()
            for symbol, child in node.links.items():
                child.fail = self._root
                candidate = node.fail
                while candidate is not None:
                    link = candidate.links.get(symbol)
                    if link is not None:
                        child.fail = link
                        break
                    candidate = candidate.fail
                fail = child.fail
                child.term = fail if fail.is_terminal else fail.term
                queue.append(child)
        self._built = True

    def _step(self, state: _Node, char: str) -> _Node:
        node: _Node | None = state
        while node is not None:
            link = node.links.get(char)
            if link is not None:
                return link
            node = node.fail
        return self._root

    def search(self, text: str) -> Iterator[tuple[int, str]]:
        """Yield ``(end_index, word)`` for every occurrence of a word in ``text``.

        At each position the longest matching word comes first, followed by
        the shorter words that end there.
        """
        if not self._built:
            self.build()
        state = self._root
        for index, char in enumerate(text):
            state = self._step(state, char)
            if state.is_terminal:
                yield index, self._words[state.out]
            node = state.term
            while node is not None:
                yield index, self._words[node.out]
                node = node.term