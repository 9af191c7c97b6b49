"""App logic package.

Rendering, section loading and refresh orchestration.
Pure Python - no Streamlit UI calls.
"""

__all__ = ["loaders", "refresh", "renderer", "tables"]
