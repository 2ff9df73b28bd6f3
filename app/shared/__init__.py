"""
Cross-cutting concerns shared by every router:
error-to-HTTP mapping, security headers, rate limiting and logging setup.
"""
