"""
APPLICATION LAYER - Use Cases

- commands/  → Write operations (login, profile update, post message)
- queries/   → Read operations (users, messages, channels)
- common/    → Command / Query base classes

Depends on the domain layer only; no HTTP code here.
"""
