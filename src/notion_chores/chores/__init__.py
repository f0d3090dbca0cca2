"""
Chore subsystem.

Components:
- errors.py: exception types raised while parsing and syncing
- properties.py: typed readers for Notion select/date properties
- frequency.py: frequency labels and their calendar offsets
- row_models.py: Row value object + parse_row
- row_state.py: per-row transition decision (pure)
- sync.py: fetch -> parse -> decide -> write-back driver
"""
