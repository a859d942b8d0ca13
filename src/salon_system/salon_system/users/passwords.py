from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

# Checked against when the login is unknown, so both failure paths hash once.
UNKNOWN_USER_HASH = generate_password_hash("no-such-user-placeholder")


class PasswordVerifier:
    """Hashes passwords for storage and checks submitted ones against them.

    werkzeug compares digests with hmac.compare_digest, so a mismatch takes
    the same time whatever the position of the first differing byte.
    """

    def hash(self, password: str) -> str:
        return generate_password_hash(password)

    def verify(self, stored: str, submitted: str) -> bool:
        if not stored or submitted is None:
            return False
        try:
            return check_password_hash(stored, submitted)
        except (ValueError, TypeError):
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            return False
