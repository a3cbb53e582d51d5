"""
MercadoPago Client - Account API binding

A small synchronous client for the MercadoPago REST API that exchanges
OAuth client credentials for a token and reads the account balance,
movements and user profile into typed records.
"""

__version__ = "0.1.0"
