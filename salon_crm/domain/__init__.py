"""
Domain Layer
============

Core business logic of the salon CRM.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Value Objects: Self-validating immutable values (Email, Price, SKU, ...)
- Models: Customer, Product, Client and MenuItem entities
- Repository Interfaces: Abstract contracts for data access
- Errors: The four domain error kinds
"""
