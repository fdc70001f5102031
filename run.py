#!/usr/bin/env python3
"""Convenience runner for the fitness tracker demo.

Usage:
    python run.py
"""
from fitness_tracker.main import main

if __name__ == "__main__":
    main()
