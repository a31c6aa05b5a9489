"""Record transforms.

This module holds pure functions applied to parsed asset records.
"""
