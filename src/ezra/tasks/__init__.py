"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskKind) and the date-time format
- task_store.py: pipe-delimited text file storage
- task_list.py: the ordered, persisted task list and its replies
"""
