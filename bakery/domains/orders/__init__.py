"""
Orders bounded context: checkout and merchandise order lifecycle.
"""
