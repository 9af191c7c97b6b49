"""App views package.

UI rendering layer for the Streamlit dashboard.
Pure rendering - no fetching or formatting.
"""

__all__ = ["colors", "dashboard"]
