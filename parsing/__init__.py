from parsing.input_parser import coerce_input, parse_input

__all__ = ["coerce_input", "parse_input"]
