"""DayBook - trading journal and risk dashboard for the command line."""

__version__ = "0.1.0"
