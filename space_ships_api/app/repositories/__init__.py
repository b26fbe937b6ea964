"""
Storage layer.

Repositories hide where ships live.  The service layer only depends on
the ``ShipRepository`` protocol, so the SQLite implementation used in
production can be replaced by the in‑memory one in tests.
"""
