"""Network tools: HTTP execution and raw sockets."""
