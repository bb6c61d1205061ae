"""
User CRUD Service — root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain model, validation rules, and the MongoDB data access layer.
"""
