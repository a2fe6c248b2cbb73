"""
API Gateway
Stateless relay between clients and the store service
"""

__version__ = "1.0.0"
