# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic:
# - models/: Pydantic schemas for users and request/response bodies
# - services/: Register, login and book operations
#
# Services talk to storage only through the UserStore interface in lib/,
# which keeps them testable with an in-memory store.
# =============================================================================
