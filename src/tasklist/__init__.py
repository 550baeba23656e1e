"""tasklist: a single-user to-do manager with a SQLite store and a console front end."""

__version__ = "0.1.0"
