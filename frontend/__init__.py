"""
Frontend
Browser client issuing create requests through the API gateway
"""

__version__ = "1.0.0"
