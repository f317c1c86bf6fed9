"""
idcheck - Swedish identifier validation

Validates a single string against the Swedish national identifier formats:
- Personnummer (personal identity number)
- Samordningsnummer (coordination number, day + 60)
- Organisationsnummer (organization number)
"""

__version__ = "0.1.0"
