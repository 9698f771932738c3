"""
Pydantic schema definitions for API payloads.

Attributes are snake_case in Python and exposed under their camelCase
names (``accountId``, ``postedBy`` ...) on the wire.  Both spellings
are accepted on input.
"""
