"""
QUERIES - Read operations

Subfolders:
- users/    → list_users
- messages/ → list_messages (all, or one channel)
- channels/ → list_channels
"""
