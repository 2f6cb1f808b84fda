"""Result Normalizer package for executing queries and shaping responses."""

from .normalizer import fetch_artworks, normalize_response, shape_result

__all__ = ["fetch_artworks", "normalize_response", "shape_result"]
