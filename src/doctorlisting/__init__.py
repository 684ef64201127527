"""
Doctor Listing: doctor profile registry service

A small FastAPI + MongoDB backend that stores doctor profiles and lists
them with exact-match filters and pagination.
"""

__version__ = "0.1.0"
__author__ = "Doctor Listing Team"
__description__ = "Doctor profile registry service"
