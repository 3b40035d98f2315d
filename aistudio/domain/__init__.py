"""
DOMAIN LAYER - Conversations, messages and presets

This layer contains:
- Entities: Business objects with identity (Conversation, Message, Preset)
- Value Objects: Immutable types (ConversationId, PresetId, PresetScope)
- Ports: Repository interfaces that infrastructure implements
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
4. This is where business rules live
"""
