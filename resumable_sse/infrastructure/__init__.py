"""Infrastructure layer: httpx-backed controller, SSE decoding, retry, logging."""
