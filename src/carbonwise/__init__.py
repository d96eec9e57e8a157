"""Carbon-Wise — lifecycle carbon engine for passenger vehicles in India."""

__version__ = "1.0.0"
