from typing import List, Optional


class MarketError(Exception):
    """Base exception for market table generation"""
    pass


class UnresolvableStationError(MarketError):
    """Raised when a station cannot be mapped to its base station"""
    pass


class UnknownTemplateError(MarketError):
    """Raised when a market table is requested with an unknown template name"""
    pass


class MarketGenerationError(MarketError):
    """
    Aggregate failure of a market computation.

    `errors` holds user-facing diagnostics which are shown verbatim.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])
