"""
Application layer package.

Contains use cases that orchestrate the collaborator ports.
Use cases let collaborator errors propagate unchanged.
"""
