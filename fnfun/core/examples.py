"""Example Helpers — the trivial functions every example applies.

Invariants:
    - All functions are pure (no IO, no state)
    - base_http_url and base_http_url_for produce identical strings for the same host/port
"""

from typing import Callable


def base_http_url(host: str, port: int) -> str:
    """A simple two argument function: (str, int) -> str."""
    return f"http://{host}:{port}"


def base_http_url_for(host: str) -> Callable[[int], str]:
    """Two argument lists, each of one argument: base_http_url_for(host)(port)."""
    def with_port(port: int) -> str:
        return base_http_url(host, port)
    return with_port


def increment(n: int) -> int:
    return n + 1


def square(n: int) -> int:
    return n * n
