"""
Version 1 of the API.

Breaking changes to the ship endpoints belong in a new version
subpackage (e.g. ``v2``).
"""
