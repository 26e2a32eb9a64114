"""
trie_search.py — Trie Prefix Search and Insert
===============================================
Builds a trie from `words`, then traces one operation on `word`:

  • "search" – follow `word` one character at a time; a missing
               character ends the search, otherwise every stored word
               below the prefix is collected (pre-order, children in
               the order they were first added)
  • "insert" – follow `word`, adding a node for each character that is
               missing, and mark the last node as the end of a word
"""

from typing import Any, Dict, Generator, List, Sequence

from algotrace.algorithms.step import StepKind, Tracer, TraceStep


PSEUDOCODE: List[str] = [
    "def find(prefix):",                            # 0
    "    node ← root",                              # 1
    "    for ch in prefix:",                        # 2
    "        if ch not in node.children: return []",    # 3
    "        node ← node.children[ch]",             # 4
    "    return every word below node",             # 5
    "def insert(word):",                            # 6
    "    for ch in word: create node if missing",   # 7
    "    mark the last node as a word end",         # 8
]

OPERATIONS = ("search", "insert")


class TrieNode:
    __slots__ = ("children", "end")

    def __init__(self):
        self.children: Dict[str, "TrieNode"] = {}
        self.end = False

    def to_dict(self, char: str = "") -> Dict[str, Any]:
        return {
            "char":     char,
            "end":      self.end,
            "children": [child.to_dict(c) for c, child in self.children.items()],
        }


class Trie:
    def __init__(self, words: Sequence[str] = ()):
        self.root = TrieNode()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> bool:
        """Store word; False if it was already there."""
        node = self.root
        for ch in word:
            node = node.children.setdefault(ch, TrieNode())
        if node.end:
            return False
        node.end = True
        return True

    def words_below(self, node: TrieNode, prefix: str) -> List[str]:
        found = [prefix] if node.end else []
        for ch, child in node.children.items():
            found += self.words_below(child, prefix + ch)
        return found

    def words(self) -> List[str]:
        return self.words_below(self.root, "")


def trie_search(
    words: Sequence[str] = ("apple", "app", "application", "banana", "band", "bat", "cat", "car"),
    operation: str = "search",
    word: str = "app",
) -> Generator[TraceStep, None, None]:
    t = Tracer()
    trie = Trie(words)
    matches: List[str] = []
    state = {"prefix": ""}

    def data() -> dict:
        return {"trie": trie.root.to_dict(), "prefix": state["prefix"], "matches": matches}

    def final_data() -> dict:
        final = data()
        final["words"] = trie.words()
        return final

    yield t.snapshot(
        StepKind.INIT, f"{operation.capitalize()} \"{word}\" in a trie of {len(trie.words())} words.",
        data(), operation=operation, word=word, line=1 if operation == "search" else 6,
    )

    node = trie.root
    if operation == "search":
        for ch in word:
            prefix = state["prefix"]
            yield t.snapshot(
                StepKind.COMPARE, f"Look for '{ch}' below \"{prefix}\".",
                data(), highlights=(prefix,), comparisons=(ch,), line=3,
            )
            if ch not in node.children:
                yield t.snapshot(
                    StepKind.COMPLETE, f"No word starts with \"{prefix + ch}\".", final_data(),
                    found=False, is_word=False, line=3,
                )
                return
            node = node.children[ch]
            state["prefix"] = prefix + ch
            yield t.snapshot(
                StepKind.VISIT, f"Follow '{ch}': prefix \"{state['prefix']}\".",
                data(), highlights=(state["prefix"],), line=4,
            )

        for found in trie.words_below(node, state["prefix"]):
            matches.append(found)
            yield t.snapshot(
                StepKind.UPDATE, f"\"{found}\" starts with \"{word}\".",
                data(), highlights=(found,), line=5,
            )
        yield t.snapshot(
            StepKind.COMPLETE, f"{len(matches)} word(s) start with \"{word}\": {matches}.", final_data(),
            highlights=tuple(matches), found=bool(matches), is_word=node.end, line=5,
        )
        return

    # insert
    for ch in word:
        prefix = state["prefix"]
        state["prefix"] = prefix + ch
        if ch in node.children:
            node = node.children[ch]
            yield t.snapshot(
                StepKind.VISIT, f"'{ch}' already follows \"{prefix}\": reuse it.",
                data(), highlights=(state["prefix"],), line=7,
            )
        else:
            node = node.children.setdefault(ch, TrieNode())
            yield t.snapshot(
                StepKind.UPDATE, f"Add node '{ch}' below \"{prefix}\".",
                data(), highlights=(state["prefix"],), created=True, line=7,
            )

    if node.end:
        yield t.snapshot(
            StepKind.COMPLETE, f"\"{word}\" is already stored.", final_data(),
            highlights=(word,), inserted=False, already_exists=True, line=8,
        )
        return
    node.end = True
    yield t.snapshot(StepKind.UPDATE, f"Mark \"{word}\" as a word.", data(), highlights=(word,), line=8)
    yield t.snapshot(
        StepKind.COMPLETE, f"Inserted \"{word}\".", final_data(),
        highlights=(word,), inserted=True, already_exists=False, line=8,
    )
