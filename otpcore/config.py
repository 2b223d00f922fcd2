"""
config.py — default parameters shared by the counter, engine and URI modules.

Every value here can be overridden per call or per constructor; nothing is read
from the environment or from files.
"""

# --- Config / constants ----------------------------------------------------
DEFAULT_DIGITS = 6          # standard: 6 digits
DEFAULT_TIME_STEP = 30      # TOTP step (seconds)
DEFAULT_T0 = 0              # TOTP epoch offset (seconds)
DEFAULT_SKEW = 1            # verify window; 1 = current step only
DEFAULT_ALGORITHM = "SHA1"  # RFC 6238 default, what Google Authenticator expects
SECRET_BYTES = 20           # 160-bit secret (common practice)
COUNTER_BYTES = 8           # HOTP message is an 8-byte big-endian counter

OTPAUTH_SCHEME = "otpauth"
TYPE_TOTP = "totp"
TYPE_HOTP = "hotp"
