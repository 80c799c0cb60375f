"""
Speech analysis CLI package.

This package contains a small CLI tool that analyzes a single speech
transcript:
- cleaning the text with a fixed, ordered filter pipeline,
- counting term frequencies and term-document occurrences,
- finding terms whose occurrence correlates with a target term,
- scoring sentiment against the Bing, AFINN and NRC lexicons,
- rendering word clouds and charts and writing a spreadsheet report.
"""

from __future__ import annotations
