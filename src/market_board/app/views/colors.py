# Static colors for consistent use across the dashboard

from market_board.core.domain_models import Sentiment


class Colors:
    # Semantic: Gain (Emerald instead of "Grass Green")
    green = "#059669"  # Emerald 600

    # Semantic: Loss
    red = "#dc2626"  # Red 600


SENTIMENT_COLORS = {
    Sentiment.POSITIVE: Colors.green,
    Sentiment.NEGATIVE: Colors.red,
}

# Streamlit markdown color names for the market-today arrows
SENTIMENT_MARKDOWN = {
    Sentiment.POSITIVE: "green",
    Sentiment.NEGATIVE: "red",
}
