"""Book record service.

A FastAPI + SQLModel service exposing create, read, update, delete, list and
search operations over a single ``book`` table.
"""

__version__ = "0.1.0"
