"""
Domain layer package.

Contains the error taxonomy, the code-mapping tables and the port
interfaces of the services the gateway fronts.
No framework imports, no IO, no side effects.
"""
