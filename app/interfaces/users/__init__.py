"""User routes and schemas."""
