"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that every classified failure
is consistently translated into an API response.
"""
