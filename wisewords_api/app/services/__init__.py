"""
Service layer abstraction.

Each service encapsulates the business logic for one entity:
validation, ownership checks and store access.  API handlers only
translate between HTTP and these services.
"""
