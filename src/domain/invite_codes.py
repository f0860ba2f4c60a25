"""
Shareable invite codes.

Upper-case letters and digits without look-alike characters (0/O, 1/I),
drawn from the OS CSPRNG.
"""

import secrets

INVITE_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
DEFAULT_INVITE_CODE_LENGTH = 10


def generate_invite_code(length: int = DEFAULT_INVITE_CODE_LENGTH) -> str:
    if length < 6:
        raise ValueError("Invite codes must be at least 6 characters")
    return "".join(secrets.choice(INVITE_CODE_ALPHABET) for _ in range(length))
