"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (create, add, update, delete)
- queries/   → Read operations (get, list)
- dto/       → Data Transfer Objects
- common/    → Command and UseCase base classes, field types

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Each use case: load → check → mutate/create → persist → return
"""
