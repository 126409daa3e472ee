from cssatom.errors import ParseError
from cssatom.parser.selectors import parse_selector, parse_selector_list
from cssatom.parser.transformer import parse_css

__all__ = ["ParseError", "parse_css", "parse_selector", "parse_selector_list"]
