"""Domain layer: passphrase models, presets, and the synthesis pipeline.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
