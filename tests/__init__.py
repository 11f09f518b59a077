# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Tryst API:
# - test_api.py: Endpoint tests through FastAPI's TestClient
# - test_user_service.py: Register/login/book logic and error translation
# - test_tokens.py: Session token signing and verification
# - test_passwords.py: bcrypt hashing helpers
# - test_stores.py: In-memory and Supabase user stores
# - test_models.py: Pydantic schema aliases and defaults
# - test_config.py: Settings defaults and validation
#
# Run tests with: pytest
# =============================================================================
