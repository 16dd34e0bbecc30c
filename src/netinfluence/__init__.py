"""netinfluence - shortest-path influence scoring for social networks."""

__version__ = "0.1.0"
