from chat_service.infrastructure.sessions.session_registry import SessionRegistry

__all__ = ["SessionRegistry"]
