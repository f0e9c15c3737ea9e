"""
Client modules for external service communication
"""

from .form import FormClient

__all__ = ["FormClient"]
