"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to:
- Network storage (CSV files)
- Route computation (Dijkstra)
- Output rendering (plain-text directions)
"""
