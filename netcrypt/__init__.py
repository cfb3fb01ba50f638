"""Classical ciphers, toy public-key schemes, CRC checksums and a leaky-bucket simulator."""

__version__ = "0.1.0"

__all__ = [
    "caesar",
    "crc",
    "diffie_hellman",
    "leaky_bucket",
    "playfair",
    "rsa",
    "vigenere",
]