"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (create customer, restock product, etc.)
- Services: Application services that coordinate the use cases of one aggregate
- DTOs: Pydantic request/response models
"""
