"""
Unit tests for the FullContact client.

Test individual components in isolation:
- Retry policy (status decisions, backoff delays, attempt ceiling)
- Request builder and credentials providers
- Response classifier (payload shapes, success codes, override header)
- Dispatcher (retry loop, transport errors, construction errors)
- Client facade (local rejections, endpoint routing, lifecycle)
"""
