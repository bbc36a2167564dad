"""
Custom Orders Application Layer
"""
