"""Grid Bounded Context.

Responsible for antenna placement on the rectangular grid:
- Value Objects: Coordinate, Antenna, AntennaGrid
- Collections: CoordinateSet, AntennaRegistry
- Services: detect_antinodes (nefasto cells)
"""
