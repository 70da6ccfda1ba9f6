"""Input adapters."""

from .ratings import from_ratings_frame, from_mapping
