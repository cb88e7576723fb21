from todo.application.services.user_service import UserService

__all__ = ["UserService"]
