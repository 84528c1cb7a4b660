#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--seed N]
    python main.py watch [--games N] [--delay S] [--seed N]
"""
from src.sweeper.cli import main


if __name__ == "__main__":
    main()
