"""Approximate-matching index used by the accelerated Levenshtein build."""

from strsim_network.index.trie import LevenshteinTrie

__all__ = ["LevenshteinTrie"]
