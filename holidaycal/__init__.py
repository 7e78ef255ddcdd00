"""Holiday definitions, observance rules and per-country holiday sets."""

__version__ = "2.0.0"