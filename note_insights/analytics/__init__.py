"""Activity statistics and heatmap series."""

from note_insights.analytics.tools import aggregate

__all__ = ["aggregate"]
