"""
Infrastructure adapters for the taskboard bounded context.

SQL-backed implementations of the TaskRepository and UserRepository ports.
"""
