"""Send text between processes one bit at a time over SIGUSR1 and SIGUSR2.

Includes the bit framing, a sending client, a receiving server, and small
character, byte-buffer, string and formatting helpers.
"""

__version__ = "0.1.0"