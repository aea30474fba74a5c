"""
Utility modules for the ratings prompt engine.

Cross-cutting concerns:
- Storage: JSON-file key-value store for the ratings state
- Settings: JSON-backed client settings
- Event logger: diagnostic event emission
- Clock and parsing helpers
"""
