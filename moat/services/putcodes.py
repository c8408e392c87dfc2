"""Put-codes for newly created activities."""

import random

PUT_CODE_MIN = 100000
PUT_CODE_MAX = 999099


def new_put_code() -> int:
    """Pick a put-code for an activity that was just created."""
    return random.randint(PUT_CODE_MIN, PUT_CODE_MAX)
