from __future__ import annotations


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    def __init__(self):
        self.root = TrieNode()
        self.size = 0

    def insert(self, word: str):
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self.size += 1

    def find(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node


class Lexicon:
    """Read-only word list answering membership and prefix queries in uppercase."""

    def __init__(self, words=()):
        self.trie = Trie()
        for word in words:
            self.trie.insert(word.upper())

    def __len__(self) -> int:
        return self.trie.size

    def contains(self, word: str) -> bool:
        node = self.trie.find(word.upper())
        return node is not None and node.is_word

    def has_prefix(self, prefix: str) -> bool:
        node = self.trie.find(prefix.upper())
        return node is not None and (node.is_word or bool(node.children))

    __contains__ = contains


def load_lexicon(path: str, min_length: int = 1) -> Lexicon:
    lexicon = Lexicon()
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().upper()
            if len(word) >= min_length and word.isalpha():
                lexicon.trie.insert(word)
    return lexicon
