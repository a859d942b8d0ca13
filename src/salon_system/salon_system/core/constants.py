"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MIN_PASSWORD_LENGTH = 6
TOKEN_VALIDITY_YEARS = 1

JWT_ALGORITHM = "HS256"
# HMAC-SHA256 needs a key at least as long as the digest (256 bits).
MIN_JWT_SECRET_BYTES = 32

AUTH_FAILED_MESSAGE = "Username or Password is incorrect!"
