"""
COMMANDS - Write operations

Subfolders:
- auth/     → login
- users/    → update_profile
- messages/ → post_message
"""
