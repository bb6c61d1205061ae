"""
API layer for the User CRUD Service.

Exposes the user routes (create, get-all, get-one, get-one-query, update,
delete) at the application root.
"""
