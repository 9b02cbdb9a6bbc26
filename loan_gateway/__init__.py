"""
Loan Gateway - Loan Amount & Period Decision Service

A FastAPI-based microservice that decides the largest loan amount and
period that can be approved for an applicant.
"""

__version__ = "0.1.0"
