"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Map storage (in-memory)
- Route solving (Dijkstra)
- API key resolution (configuration-held keys)
"""
