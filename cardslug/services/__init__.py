"""
CardSlug services.

Dictionary management and lookup construction around the slug parser.
"""
