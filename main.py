#!/usr/bin/env python3
"""
Airbnb CLI - Top-priced listing ranker

A CLI tool that loads Airbnb listings from a CSV file and shows the highest-priced ones.
"""

from airbnb_cli.cli import cli

if __name__ == '__main__':
    cli()
