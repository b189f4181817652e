class XmlParseError(Exception):
    """Raised when an XML lab report is not well-formed."""
