"""itemstream: checkpointed sequential readers.

Reads items one at a time from an ordered source and records how far it got
in a caller-owned checkpoint context, so a restarted run picks up where the
last checkpoint left off.
"""

__version__ = "0.1.0"
