"""
Domain layer: typed records for the Shopify REST resources.
"""
