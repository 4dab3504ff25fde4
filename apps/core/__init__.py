"""
Core app - Shared abstractions and utilities.

This app provides the pieces every other app leans on:
- Service-level exceptions (NotFound, AlreadyExists)
"""
