"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that framework and domain errors
are consistently translated into response envelopes.
"""
