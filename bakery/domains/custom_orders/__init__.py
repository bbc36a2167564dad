"""
Custom orders bounded context: cake configuration pricing and bespoke order lifecycle.
"""
