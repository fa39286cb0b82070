"""
pdf2quiz
========
Converts a multiple-choice question PDF into the JSON question bank
consumed by the quiz app.

Pipeline:
    - Text Extractor: PyMuPDF turns the PDF bytes into plain text
    - Segmenter: line-by-line scan for question and option markers
    - Converter: writes the raw-text dump and the questions JSON
    - Validator: checks hand-corrected question files

Version: 1.0.0
"""

__version__ = "1.0.0"
