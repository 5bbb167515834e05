"""iyzipay API client with request canonicalization and signing."""

from .client import IyzipayClient
from .config import ClientOptions, Credentials, load_options, options_from_env
from .signing import ApiVersion, AuthHeaderBuilder, SigningError
from .signing.headers import CLIENT_VERSION as __version__
from .transport import HttpTransport, Transport

__all__ = [
    "ApiVersion",
    "AuthHeaderBuilder",
    "ClientOptions",
    "Credentials",
    "HttpTransport",
    "IyzipayClient",
    "SigningError",
    "Transport",
    "__version__",
    "load_options",
    "options_from_env",
]
