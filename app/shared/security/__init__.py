"""
Security package.

Rate limiting shared by every router.
"""
