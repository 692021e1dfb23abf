"""sessionlink - relink coding-agent session folders safely.

Replaces a session directory with a symbolic link to another session
directory inside a reversible transaction.
"""

__version__ = "0.1.0"
