from .draw import DrawContext

__all__ = ["DrawContext"]
