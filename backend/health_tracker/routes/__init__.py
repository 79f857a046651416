# Routes package
from .entries import entries_bp

__all__ = ['entries_bp']
