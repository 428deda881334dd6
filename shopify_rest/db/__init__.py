"""
Request/response pipeline and resource clients for the Shopify REST API.
"""
