"""Similarity matrix construction."""

from .builder import build_similarity_matrix

__all__ = ["build_similarity_matrix"]
