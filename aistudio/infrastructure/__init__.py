"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: repository adapters (in-memory and Prisma/PostgreSQL)
"""
