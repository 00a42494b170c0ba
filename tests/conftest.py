"""
Pytest configuration.

Puts the project root on sys.path so the tests run from a plain checkout
as well as from an installed copy.
"""

import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)
