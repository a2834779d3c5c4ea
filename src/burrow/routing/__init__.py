"""Routing — declarative route tree compiled into a longest-prefix trie.

Routes are declared as a tree of ``Leaf`` and ``Branch`` values and
compiled once, before serving, into an immutable byte-keyed trie.
"""
