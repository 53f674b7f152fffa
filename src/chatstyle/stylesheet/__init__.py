from chatstyle.stylesheet.parser import ParsedStylesheet, StylesheetParser, parse_declarations, parse_stylesheet

__all__ = ["ParsedStylesheet", "StylesheetParser", "parse_declarations", "parse_stylesheet"]
