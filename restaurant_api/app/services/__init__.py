"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  API handlers
call services and never talk to storage directly.
"""
