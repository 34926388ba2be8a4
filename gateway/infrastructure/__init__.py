"""
Infrastructure layer package.

In-process adapters implementing the domain ports.
"""
