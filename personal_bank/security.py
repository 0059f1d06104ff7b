"""
Credential hashing.

Credentials are never stored in plain text. Each one is
hashed with bcrypt under its own random salt; checking a
candidate recomputes the hash with the stored salt.

bcrypt only reads the first 72 bytes of its input (and
bcrypt 5 refuses longer input outright), so new credentials
are limited to MAX_CREDENTIAL_BYTES of UTF-8.
"""

import bcrypt

from personal_bank.config import get_settings
from personal_bank.exceptions import InvalidCredentialError

MAX_CREDENTIAL_BYTES = 72


def check_credential(credential: str) -> str:
    """
    Validate a new credential before it is hashed.

    Raises InvalidCredentialError if it is empty or longer
    than MAX_CREDENTIAL_BYTES once encoded.
    """
    if not credential:
        raise InvalidCredentialError("Password must not be empty.")
    if len(credential.encode("utf-8")) > MAX_CREDENTIAL_BYTES:
        raise InvalidCredentialError(
            f"Password must be at most {MAX_CREDENTIAL_BYTES} bytes long."
        )
    return credential


def hash_credential(credential: str) -> str:
    """Return a salted bcrypt hash of the credential."""
    check_credential(credential)
    rounds = get_settings().BCRYPT_ROUNDS
    hashed = bcrypt.hashpw(credential.encode("utf-8"), bcrypt.gensalt(rounds))
    return hashed.decode("utf-8")


def verify_credential(candidate: str, credential_hash: str) -> bool:
    """Check a candidate credential against a stored hash."""
    if len(candidate.encode("utf-8")) > MAX_CREDENTIAL_BYTES:
        # No stored credential can be this long
        return False
    try:
        return bcrypt.checkpw(
            candidate.encode("utf-8"), credential_hash.encode("utf-8")
        )
    except ValueError:
        # Malformed stored hash: treat as a mismatch
        return False
