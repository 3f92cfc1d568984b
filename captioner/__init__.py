# Path: captioner/__init__.py
# Purpose: Package initializer for the gallery captioning application layer.
# Layer: captioner.
# Details: Aggregates subpackages for models, scanning, caption storage, reconciliation, viewers, and editing sessions.
