"""
Backlog API - Application Package
=================================

What: CRUD HTTP service over a single `backlog_items` table.
Who:  Imported by uvicorn (`backlog_api.main:create_app --factory`), Alembic,
      and pytest.

Layers:

    ┌─────────────────────────────────────┐
    │       Routes (route table)          │  ← HTTP verbs/paths → handlers
    ├─────────────────────────────────────┤
    │       Services                      │  ← not-found + error translation
    ├─────────────────────────────────────┤
    │       Repositories                  │  ← find-all / find-by-id / save / delete
    ├─────────────────────────────────────┤
    │       Models & Schemas              │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │       Database                      │  ← engine + session factory on app.state
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
