"""
Entry point for python -m loganalyzer
"""

from loganalyzer.cli import cli

if __name__ == "__main__":
    cli()
