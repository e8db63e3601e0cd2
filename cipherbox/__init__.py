"""Classical and historical ciphers, DES, Blowfish, RC4, Enigma, MD2, MD5 and a Hamming code."""

__version__ = "0.1.0"