"""
legalfields: derived fields for legal-register records
"""

__version__ = "0.1.0"
