"""
INFRASTRUCTURE LAYER - Adapters for ports defined in domain.

- persistence/: prisma implementations of the repository ports
- sessions/: in-process bearer session registry
"""
