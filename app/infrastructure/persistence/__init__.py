"""Persistence: engine, ORM models, repositories, transactions, migrations."""
