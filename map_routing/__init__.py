"""Map routing service.

Holds a directed weighted map in memory and answers shortest route and
distance queries between named nodes over an HTTP API.
"""

__version__ = "0.1.0"
