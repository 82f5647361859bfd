"""
Database layer.

`session` owns the engine and session factory, `models` the SQLAlchemy tables
and `create_tables` the schema bootstrap.
"""
