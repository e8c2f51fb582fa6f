from .uuid import Uuid

__all__ = ["Uuid"]
