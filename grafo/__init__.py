"""Read undirected weighted graphs and analyse components, diameters, bipartiteness and cuts."""

__version__ = "0.1.0"
__all__ = ["graph", "analysis", "cli"]