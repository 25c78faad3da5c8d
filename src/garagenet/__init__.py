"""garagenet: Veteran's Garage Network directory client."""

__version__ = "0.1.0"
