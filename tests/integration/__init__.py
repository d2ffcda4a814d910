"""
Integration tests for the FullContact client.

Exercise the public client end to end against an in-process fake API
served through httpx.MockTransport; no network access is required.
"""
