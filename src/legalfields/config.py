import os

# Logging
LOG_LEVEL = os.environ.get("LEGALFIELDS_LOG_LEVEL", "WARNING").upper()

# DGUV publications catalogue
DGUV_BASE_URL = "https://publikationen.dguv.de/regelwerk"
DGUV_QUERY = "?c=13"

# BAuA technical rules
BAUA_BASE_URL = "https://www.baua.de/DE/Angebote/Rechtstexte-und-Technische-Regeln/Regelwerk"

# Federal law portal
GII_BASE_URL = "https://www.gesetze-im-internet.de"

# UK key suffix for records flagged as duplicates
DUPLICATE_SUFFIX = "_dup"
