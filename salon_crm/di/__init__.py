"""
Dependency Injection
====================

Container and providers that build the object graph at application start.
"""
