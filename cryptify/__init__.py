"""
Cryptify - byte-shift file obfuscation tool

Turns any file into an obfuscated copy and back using a numeric key.
The shift applied to each byte is the digit sum of the key.

NOT cryptographically secure: this is reversible obfuscation only.
"""

__version__ = "1.0.0"
__author__ = "cryptify"
