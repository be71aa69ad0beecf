"""Auth module constants."""

# JWT claim names
CLAIM_SUBJECT = "sub"
CLAIM_PRINCIPAL_TYPE = "type"
CLAIM_ROLE = "role"

# Error messages
MSG_NOT_AUTHENTICATED = "Not authenticated"
MSG_INVALID_TOKEN = "Invalid or expired token"
MSG_MISSING_CLAIMS = "Token is missing required claims"
MSG_INSUFFICIENT_PERMISSIONS = "Forbidden: insufficient permissions"
MSG_INVALID_CREDENTIALS = "Invalid credentials"
