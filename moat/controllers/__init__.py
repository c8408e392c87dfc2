"""
Request handling logic for the mock registry.

Controllers take plain arguments and return a ``(value, status, headers)``
tuple, where ``value`` is a :mod:`moat.domain` instance for the routes to
serialize. Client errors are raised as :mod:`moat.exceptions`.
"""

from typing import Any, Dict, Tuple

Response = Tuple[Any, int, Dict[str, str]]
