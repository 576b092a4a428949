"""
Portaria - Gestao de portaria de condominio
"""
__version__ = "1.0.0"
