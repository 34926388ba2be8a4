"""
Leaf error contracts.

Each module describes the failures one collaborator reports.
The gateway never raises these on its own behalf; it classifies them.
"""
