"""
COMMANDS - Write operations

Subfolders:
- conversations/ → create_conversation, add_message, update_title,
                   delete_conversation
- presets/       → create_preset, update_preset, delete_preset
"""
