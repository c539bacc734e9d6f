"""Game recommendations from a similarity graph built over a tilde-separated game catalogue."""

__version__ = "0.1.0"
__all__ = ["app", "csv_reader", "recommender"]