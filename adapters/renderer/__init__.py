from .text_renderer import TextRenderer, format_operand

__all__ = ["TextRenderer", "format_operand"]
