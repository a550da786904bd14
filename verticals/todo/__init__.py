"""Todo vertical: task-list CRUD over HTTP.

Pieces, leaf-first:
- Pydantic schemas for the Task entity and the SQLAlchemy table model
- Named validation rules built on the rules engine pattern
- TaskStore contract with in-memory and relational implementations
- FastAPI router mapping /task endpoints onto the store
- Dataclass configuration
"""
