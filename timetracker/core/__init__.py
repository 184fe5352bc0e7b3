"""
Core utilities shared across the time tracker.

Configuration lives here so that repositories/services do not read
os.environ directly.
"""
