"""
Task subsystem.

Components:
- task_models.py: data structures (Task, ListedTask) and the StoreError family
- task_codec.py: one Task <-> one JSON line
- task_reader.py: pending-only renumbering (display indices 1..K)
- task_compactor.py: rewrite-to-side-file + atomic rename
- task_store.py: flat-file store (append / list / complete)
- task_api.py: small high-level helpers used by the CLI
"""
