"""Filterable and scrollable lists, column headers, YAML configuration and discovery lookup for browsing Kubernetes resources."""

__version__ = "0.1.0"