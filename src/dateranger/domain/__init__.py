"""Domain layer — moments, calendar periods, ranges, and symbolic dates.

This layer depends only on stdlib and python-dateutil.
It must never import from services, output, commands, or config.
"""
