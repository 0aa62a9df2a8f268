"""
Task subsystem.

Components:
- task_models.py: Task, Todo, Deadline, Event and their one-line text form
- task_list.py: in-memory task list kept in sync with Storage
"""
