"""OUI textfile collector - publishes the IEEE OUI registry as node_exporter metrics."""

__version__ = "0.1.0"
__author__ = "OUI Collector Team"

__all__ = [
    "__version__",
    "__author__",
]
