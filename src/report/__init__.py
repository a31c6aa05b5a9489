"""Match report rendering.

This module formats match requests and results as console text.
It derives short display names from source paths.
"""
