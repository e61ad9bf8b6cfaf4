"""
Core Utilities Package

Chứa các utility modules:
- safe_timer: Thread-safe one-shot timer với cancellation
- qt_utils: Signal bridge về main thread, QTimer-based one-shot timer
"""
