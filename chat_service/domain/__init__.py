"""
DOMAIN LAYER

This layer contains:
- Entities: User, Message, Session
- Value Objects: UserId, MessageId
- Ports: repository and credential store interfaces implemented by infrastructure
- Exceptions: domain errors mapped to HTTP status codes by the presentation layer

Only depends on Python stdlib.
"""
