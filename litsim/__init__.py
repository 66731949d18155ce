"""litsim - game-balance simulation engine for stat-progression fiction."""

__version__ = "0.1.0"
