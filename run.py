"""
Entry Point Script (Bootstrap)
==============================
This script is a convenient starting point of the application for development.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a runner.
2. It modifies 'sys.path' so that 'from elasticnet...' resolves without
   installing the package first.

Usage:
    $ python run.py --cities 50 --seed 1
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from elasticnet.main import main

if __name__ == "__main__":
    main()
