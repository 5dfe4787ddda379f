#!/usr/bin/env python3
"""
scantiff - Main Launcher

Entry point for running the converter from a source checkout.
It runs the main function from the scantiff package.
"""
import os
import sys
import traceback

# Main entry point
if __name__ == "__main__":
    # Add the current directory to the Python path
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

    try:
        from scantiff.main import main
        main()
    except ImportError as e:
        print(f"Error importing the application: {str(e)}", file=sys.stderr)
        print("\nPlease make sure you have Python 3.10 or higher and ImageMagick installed.", file=sys.stderr)
        traceback.print_exc()
        sys.exit(1)
