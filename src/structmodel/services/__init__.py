"""Service layer: JSON encode/decode, file I/O and rule validation.

Services may import from domain and infrastructure layers.
They must never import from the CLI or output modules.
"""
