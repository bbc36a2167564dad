"""
Discounts Application Layer
"""
