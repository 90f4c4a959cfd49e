"""
Core building blocks: models, normalization, validators, rules and deduplication.
"""
