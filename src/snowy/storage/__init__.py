"""
Storage subsystem.

Components:
- storage.py: plain-text task file (append, rewrite via staging file, load)
- task_decoder.py: parses stored lines back into tasks
"""
