"""
Service layer abstraction.

Business rules for ships live here: filtering, ordering and paging in
``ship_filters`` and validation, rating and the CRUD facade in
``ship_service``.  API handlers call into this layer and never touch
storage directly.
"""
