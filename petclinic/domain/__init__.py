"""
Domain layer - errors and helpers shared by repositories and services.
"""
