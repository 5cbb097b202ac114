# sshca_core/constants.py

# Storage slots written by config/ca
PUBLIC_KEY_STORAGE_KEY = "public_key"
CA_BUNDLE_STORAGE_KEY = "config/ca_bundle"

# Internal generation parameters
RSA_KEY_BITS = 4096
RSA_PUBLIC_EXPONENT = 65537

# Request field whose presence matters
FIELD_GENERATE_SIGNING_KEY = "generate_signing_key"

# User-facing rejections
MSG_GENERATE_CONFLICT = "public_key and private_key must not be set when generate_signing_key is set to true"
MSG_MISSING_PUBLIC_KEY = "missing public_key"
MSG_MISSING_PRIVATE_KEY = "missing private_key"
MSG_HALF_SET = "only one of public_key and private_key set; both must be set to use, or both must be blank to auto-generate"
MSG_BAD_PRIVATE_KEY = "Unable to parse private_key as an SSH private key: {}"
MSG_BAD_PUBLIC_KEY = "Unable to parse public_key as an SSH public key: {}"

# Internal failure
MSG_EMPTY_KEYS = "failed to generate or parse the keys"

CONFIG_CA_SYNOPSIS = "Set the SSH private key used for signing certificates."
CONFIG_CA_DESCRIPTION = """This sets the CA information used for certificates generated by this
mount. The fields must be in the standard private and public SSH format.

For security reasons, the private key cannot be retrieved later."""
