"""SQLAlchemy persistence for the habit domain.

Provides:
- Base: Declarative base shared with the identity models
- HabitModel / HabitCheckModel: table mappings
- HabitRepositorySQLAlchemy / HabitCheckRepositorySQLAlchemy: store adapters
- create_engine, create_tables, drop_tables: engine and schema helpers
"""
