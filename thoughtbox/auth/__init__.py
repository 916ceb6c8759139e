"""Authentication module for Thoughtbox.

This module provides:
- Schema validation for signup and signin
- Password hashing and verification (bcrypt)
- CredentialService: registration and credential verification
- AccessGate: access-token check for protected endpoints
- @auth_required decorator wiring the gate into Flask

Auth endpoints (top-level routes):
- POST /signup - Register and receive an access token
- POST /signin - Verify credentials and receive the same access token

Protected requests send the token verbatim in the Authorization header.
"""

from . import schemas

__all__ = ["schemas"]
