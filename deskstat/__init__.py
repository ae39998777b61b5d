"""System readings (CPU, memory, battery, network, keyboard, volume) as short status strings."""

__version__ = "1.0.0"