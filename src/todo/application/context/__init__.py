from todo.application.context.requester import Requester

__all__ = ["Requester"]
