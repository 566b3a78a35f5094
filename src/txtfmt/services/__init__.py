"""Service layer — wraps the layout engine in ServiceResult contracts.

Commands call services; services never print.
"""
