"""
Module entry point for: python -m pdf2quiz

    python -m pdf2quiz convert [options]
    python -m pdf2quiz validate <json_path>
    python -m pdf2quiz info <pdf_path>
    python -m pdf2quiz lines <raw_text_path>
"""

from .cli import cli


def main():
    cli()


if __name__ == "__main__":
    main()
