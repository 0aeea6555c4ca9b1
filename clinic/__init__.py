"""
Clinic Manager

A FastAPI-based clinic management service: patient records, appointment
scheduling, doctor availability and permission-gated administration.
"""

__version__ = "1.0.0"
