# fourc/__init__.py
"""
The 4C cost model: Cadence x Conversation x Computation across a Composition of agents.

Compares pay-as-you-go agent cost with a flat per-user license fee.
"""

__version__ = "0.1.0"
