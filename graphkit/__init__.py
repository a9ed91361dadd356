"""Graph representations, traversal, connectivity, cuts, Euler and Hamilton cycles."""

__version__ = "0.1.0"

__all__ = ["cli", "cuts", "directed", "euler", "hamilton", "search", "undirected"]