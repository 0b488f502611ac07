"""Domain layer: authorization enums, entities, errors and protocols.

Pure Python with no framework dependencies.
"""
