"""
Allow ``python -m brick_bounce``.
"""

from brick_bounce.app import run

run()
