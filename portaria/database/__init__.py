from .session import Base, build_engine, init_db

__all__ = ["Base", "build_engine", "init_db"]
