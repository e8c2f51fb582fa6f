"""Persistence core for the catalog administration service."""
