"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- HTTP status catalog and response envelope formatting
- Error handling and mapping
- Rate limiting
- Logging configuration
"""
