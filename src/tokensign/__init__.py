"""
tokensign: pluggable signing methods for compact tokens.

Ships the keyed-hash MAC family (HS256, HS384, HS512) and the registry that
maps algorithm names to signing methods.
"""

__version__ = "1.0.0"
