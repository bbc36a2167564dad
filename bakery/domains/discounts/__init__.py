"""
Discounts bounded context: code validation and usage accounting at checkout.
"""
