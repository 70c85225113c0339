"""Image decode, resize and re-encode pipeline."""

from note_insights.images.tools import normalize, normalize_in_worker

__all__ = ["normalize", "normalize_in_worker"]
