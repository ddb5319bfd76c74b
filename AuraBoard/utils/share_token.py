import secrets
import string

SHARE_TOKEN_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_"
SHARE_TOKEN_LENGTH = 22


def generate_share_token(length=SHARE_TOKEN_LENGTH):
    """
    Random public token for a moodboard link.
    Uniqueness is enforced by the store, not here.
    """
    return "".join(secrets.choice(SHARE_TOKEN_ALPHABET) for _ in range(length))
