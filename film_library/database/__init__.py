from .db import new_engine, create_tables, wait_for_db, get_session, violated_constraint

__all__ = ["new_engine", "create_tables", "wait_for_db", "get_session", "violated_constraint"]
