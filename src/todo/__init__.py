"""Todo - user registration, login and CRUD backend."""

__version__ = "1.0.0"
