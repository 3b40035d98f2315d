"""
Persistence Layer - Database implementations of the repository ports.

- memory/: in-process adapters (tests, local runs without a database)
- prisma_*: PostgreSQL adapters through prisma-client-py. Import them via
  aistudio.infrastructure.persistence.prisma_client, which needs a generated
  client (`prisma generate`).
"""

from aistudio.infrastructure.persistence.memory import InMemoryAdapters, InMemoryStore

__all__ = [
    "InMemoryAdapters",
    "InMemoryStore",
]
