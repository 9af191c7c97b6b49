"""Market Board - live market dashboard client.

Fetches market status, market summary and gainer/loser rankings from the
stock API and turns them into display rows for the dashboard.
"""

__version__ = "0.1.0"
