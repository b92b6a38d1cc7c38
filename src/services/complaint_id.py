import secrets
import time
from src.core.config import COMPLAINT_ID_PREFIX


def generate_complaint_id(prefix: str = COMPLAINT_ID_PREFIX) -> str:
    """
    Human-facing complaint id: prefix, epoch milliseconds, random hex tail.

    The tail keeps ids generated within the same millisecond apart; the
    unique index on ``complaintId`` still rejects any collision.
    """
    millis = int(time.time() * 1000)
    return f"{prefix}{millis}{secrets.token_hex(3).upper()}"
