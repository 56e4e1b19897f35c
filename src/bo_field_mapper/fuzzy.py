#!/usr/bin/env python3
"""
String similarity for bo-field-mapper.

Normalized Levenshtein similarity used by the auto-mapper to score
business field names against column names. Comparison is case-sensitive;
callers lower-case both sides when they want case-insensitive scoring.
"""


class FuzzyMatcher:
    """Implements edit-distance based string matching."""

    @staticmethod
    def levenshtein_distance(s1: str, s2: str) -> int:
        """Calculate Levenshtein distance between two strings."""
        if len(s1) < len(s2):
            return FuzzyMatcher.levenshtein_distance(s2, s1)

        if len(s2) == 0:
            return len(s1)

        previous_row = list(range(len(s2) + 1))
        for i, c1 in enumerate(s1):
            current_row = [i + 1]
            for j, c2 in enumerate(s2):
                insertions = previous_row[j + 1] + 1
                deletions = current_row[j] + 1
                substitutions = previous_row[j] + (c1 != c2)
                current_row.append(min(insertions, deletions, substitutions))
            previous_row = current_row

        return previous_row[-1]

    @staticmethod
    def similarity(s1: str, s2: str) -> float:
        """
        Normalized similarity in [0.0, 1.0]: (L - d) / L where L is the
        longer length and d the edit distance. Two empty strings score 1.0.
        """
        max_len = max(len(s1), len(s2))
        if max_len == 0:
            return 1.0

        distance = FuzzyMatcher.levenshtein_distance(s1, s2)
        return (max_len - distance) / max_len


def similarity(a: str, b: str) -> float:
    """Module-level shortcut for FuzzyMatcher.similarity."""
    return FuzzyMatcher.similarity(a, b)
