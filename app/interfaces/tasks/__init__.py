"""Task routes and schemas."""
