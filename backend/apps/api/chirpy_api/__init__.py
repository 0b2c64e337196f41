"""
Chirpy API Package.

FastAPI application serving users, chirps and authentication.
"""
