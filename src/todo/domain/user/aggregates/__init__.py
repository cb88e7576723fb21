from todo.domain.user.aggregates.user import User

__all__ = ["User"]
