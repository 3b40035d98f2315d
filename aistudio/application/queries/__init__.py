"""
QUERIES - Read operations

Each query module has:
- Command class: Parameters for the read
- UseCase class: Executes the read

Subfolders:
- conversations/ → get_conversation, list_conversations
- presets/       → get_preset, list_presets
"""
