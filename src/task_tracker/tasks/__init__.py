"""
Task subsystem.

Components:
- task_models.py: the Task entity, Priority enum, ValidationError, id/timestamp helpers
- task_api.py: whole-collection save/load helpers on top of StorageManager
"""
