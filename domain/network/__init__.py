"""Network Bounded Context.

Responsible for same-frequency links between antennas:
- Entities: Vertex, Edge, AntennaGraph
- Value Objects: AntennaPath
- Services: depth_first, breadth_first, all_paths, cross_pairs
"""
