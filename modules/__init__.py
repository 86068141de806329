"""
Feature modules for the Hire My Hub backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- repository.py: Supabase queries and row mapping
- service.py: Business logic, gated on the caller's session
- routes.py: FastAPI route handlers
- exceptions.py: Module-specific exceptions

Feature services read the caller's role and profile from
modules.auth.SessionContext; they never resolve roles themselves.
"""
