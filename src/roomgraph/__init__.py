"""Roomgraph - Resolve which rooms neighbour each other across their boundaries.

Roomgraph takes rooms (spaces) described by closed boundary loops of lines, arcs and
Bezier curves, pairs every boundary segment with the nearest segment of another room and
confirms the pairing with a containment probe across the partition between them.

Example:
    $ roomgraph floor-2.json

This prints every room followed by the rooms it is adjacent to.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
