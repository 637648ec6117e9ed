"""linkwatch: report outbound links that are new since the last run."""

__version__ = "0.1.0"
