"""Multi-net grid maze routing with BFS or A*, a maze generator and a pygame viewer."""

__version__ = "0.1.0"