# mirror <sysexits.h>
EXIT_OK = 0  # Normal success
EXIT_GENERIC = 1  # Generic failure (fallback)
EXIT_DATAERR = 65  # Input data was invalid (e.g., malformed coverage-final.json)
EXIT_NOINPUT = 66  # Input file not found (e.g., coverage-final.json missing)
EXIT_CONFIG = 78  # Invalid configuration (e.g., bad [tool.istcov] table)
