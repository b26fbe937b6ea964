"""
Pydantic schema definitions for API payloads.

Field names are snake_case in Python and camelCase on the wire
(``shipType``, ``prodDate``, ``isUsed``, ``crewSize``) through
pydantic aliases.
"""
