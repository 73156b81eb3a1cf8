"""Greenacre game backend: storage models and database seeding."""
