"""
Data layer for the chart drawings client.

Subpackages
-----------
clients/    External API client (charts-storage + chart-token endpoints).
services/   Services that compose the client, builder and parser.

Top-level modules
-----------------
models.py   Pydantic models for parsed drawings, groups and credentials.
styles.py   Per-type default styles, z-orders and parser whitelists.
"""
