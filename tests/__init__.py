"""Test suite for the device session auth service.

Test structure:
- unit/: Handler and service logic with mocked collaborators
- integration/: Real bcrypt, PyJWT, fakeredis and SQLite, plus the
  end-to-end session lifecycle
"""
