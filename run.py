#!/usr/bin/env python3
"""Convenience runner for the drone navigation geometry service.

Usage:
    python run.py [--host HOST] [--port PORT]
"""
from dronenav.main import main

if __name__ == "__main__":
    main()
