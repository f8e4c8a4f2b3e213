"""Domain layer for stores and ratings."""
