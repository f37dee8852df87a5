"""SQLAlchemy (async) persistence for rooms and participants."""
