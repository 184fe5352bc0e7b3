"""
High-level use cases for the time tracker.

Scripts and any future front end call these services with a storage handle
they were given, instead of reading or writing storage keys directly.
"""
