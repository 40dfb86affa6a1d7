"""Raw socket session helpers."""

from .repl import open_socket_target, parse_socket_target, read_response

__all__ = ["open_socket_target", "parse_socket_target", "read_response"]
