"""Thompson-construction NFAs with Graphviz rendering."""

__version__ = "0.1.0"
__all__ = ["nfa", "graphviz"]