"""Building blocks for post-quantum signatures: modular arithmetic, vector coding, hashing."""

__version__ = "0.1.0"

__all__ = ["modulo", "vectenc", "spx_paramset", "xoesch", "symmetric", "sign_api"]