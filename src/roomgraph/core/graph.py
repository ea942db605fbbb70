"""Adjacency graph construction."""

from roomgraph.domain import Adjacency, AdjacencyGraph


class AdjacencyGraphBuilder:
    """Aggregates confirmed adjacencies into a region to neighbours map.

    Each adjacency only adds the target region to the source region's set. The
    reverse entry appears only when the other side confirmed its own pairing, so
    the graph may be asymmetric.
    """

    def build(self, region_ids: list[str], adjacencies: list[Adjacency]) -> AdjacencyGraph:
        """Build the graph.

        Args:
            region_ids: Regions to include, each with at least an empty set
            adjacencies: Confirmed adjacencies

        Returns:
            AdjacencyGraph with deduplicated neighbour sets
        """
        graph = AdjacencyGraph()
        for region_id in region_ids:
            graph.add_region(region_id)

        for adjacency in adjacencies:
            graph.add_region(adjacency.region_id)
            graph.neighbour_map[adjacency.region_id].add(adjacency.neighbour_id)
            graph.adjacencies.append(adjacency)

        return graph
