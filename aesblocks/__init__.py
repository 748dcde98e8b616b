"""AES-256 block encryption and decryption of messages, with a timing command."""

__version__ = "0.1.0"