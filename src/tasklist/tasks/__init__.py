"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority) and the canonical sort order
- task_store.py: SQLite-backed async storage (create/list/update/delete/delete-all)
"""
