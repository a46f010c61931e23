from .ticker import Ticker

__all__ = ['Ticker']
