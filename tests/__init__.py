"""Test suite for resumable_sse.

Test structure:
- unit/: Unit tests - each module in isolation, HTTP over in-memory transports

No test touches the network.
"""
