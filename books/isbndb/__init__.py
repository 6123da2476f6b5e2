from .client import IsbnDbClient

__all__ = ['IsbnDbClient']
