"""
Persistent data model for the streaming catalog: tables, relations and
insert validation.
"""
__version__ = "1.0.0"
