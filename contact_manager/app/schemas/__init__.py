"""
Pydantic schema definitions for form payloads and stored records.
"""
