from todo.application.ports.user_service import UserServicePort

__all__ = ["UserServicePort"]
