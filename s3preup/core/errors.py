"""Exception groups raised by the S3 upload provider.

Nothing here wraps the SDK: botocore exceptions reach the caller as raised.
The tuples below name which of them belong to provider construction and
which to URL signing, for use in ``except`` clauses.
"""

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    InvalidRegionError,
    NoCredentialsError,
    NoRegionError,
    PartialCredentialsError,
    ProfileNotFound,
)

CONFIGURATION_ERRORS: tuple[type[Exception], ...] = (
    NoCredentialsError,
    PartialCredentialsError,
    ProfileNotFound,
    InvalidRegionError,
    NoRegionError,
)

# Anything the signer raises; credentials that vanish after construction
# surface here as NoCredentialsError too.
SIGNING_ERRORS: tuple[type[Exception], ...] = (BotoCoreError, ClientError)
