"""Collect host CPU, memory, disk, network and node information and serve it over HTTP as JSON."""

__version__ = "1.0.0"
__all__ = ["__version__"]