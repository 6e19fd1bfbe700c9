"""ReportForge - Authorship and citation text for generated reports.

This package collects the people behind a pathway or reaction, formats
the publications it cites and shapes text for layout engines.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
