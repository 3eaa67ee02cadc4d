"""Application Layer.

Infrastructure services that feed the domain from external sources.
This layer handles I/O and coordinates domain operations.
"""
