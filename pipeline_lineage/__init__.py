"""Pipeline lineage explorer: query and browse a graph of programs and datasets."""

__version__ = "0.1.0"
