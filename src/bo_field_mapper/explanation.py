#!/usr/bin/env python3
"""Human-readable justification for automatic mapping scores."""

EXPLANATION_TIERS = (
    (0.95, "near-exact name match, very high confidence"),
    (0.8, "high semantic similarity, consistent sampled type"),
    (0.6, "AI-suggested match, recommend manual confirmation"),
)

FALLBACK_EXPLANATION = "AI-recommended mapping, please verify sampled values."


def explain(score: float) -> str:
    """Explanation for the highest tier the score reaches."""
    for threshold, text in EXPLANATION_TIERS:
        if score >= threshold:
            return text
    return FALLBACK_EXPLANATION
