"""State layer.

Holds the process-local projection of the remote stations table. The
backend stays authoritative: the cache is read-through and is
invalidated, never patched, after writes.
"""
