"""
Service layer abstraction.

Services encapsulate the operations of a domain over a store object,
so the API handlers never touch the collection directly.
"""
