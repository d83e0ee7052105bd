"""AES-128 block cipher with its individual round steps, file encryption and a command."""

__version__ = "0.1.0"
__all__ = ["cipher", "cli", "galois", "key", "transforms"]