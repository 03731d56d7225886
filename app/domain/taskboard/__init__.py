"""
Taskboard bounded context — domain layer.

This module contains all domain logic for the taskboard context:
- Tasks and their lifecycle status
- Users that own tasks
- Paginated result pages
- Failure kinds surfaced to the interface layer
"""
