"""
Service layer abstraction.

Services hold the business rules and talk to the contact store, so
route handlers stay free of persistence details.
"""
