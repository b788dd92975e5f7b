from urllib.parse import urlsplit, urlunsplit

from linkshort.core.errors import InvalidURL

MAX_URL_LENGTH = 2048
ALLOWED_SCHEMES = ("http", "https")
DEFAULT_SCHEME = "https"


def _split(address: str):
    try:
        return urlsplit(address)
    except ValueError:
        raise InvalidURL("Couldn't parse provided URL")


def canonicalize(address: str) -> str:
    """
    Normalize a user supplied address into an absolute URL.

    A missing scheme defaults to https, a leading "www." label is dropped
    and the host must look like domain + TLD. Raises InvalidURL otherwise.
    """
    address = (address or "").strip()
    if not address:
        raise InvalidURL("No URL provided")
    if len(address) > MAX_URL_LENGTH:
        raise InvalidURL(f"URL must be less than {MAX_URL_LENGTH} characters")

    parts = _split(address)
    if not parts.scheme or not parts.netloc:
        # Without a scheme the host ends up in the path, parse again
        parts = _split(f"{DEFAULT_SCHEME}://{address}")

    if parts.scheme not in ALLOWED_SCHEMES:
        raise InvalidURL("Only HTTP and HTTPS URLs are allowed")

    host = parts.hostname or ""
    try:
        port = parts.port
    except ValueError:
        raise InvalidURL("Invalid port")

    while host.split(".")[0] == "www":
        host = host[len("www."):]

    labels = host.split(".")
    if len(labels) < 2 or any(not label for label in labels):
        raise InvalidURL("Malformed URL")

    netloc = host if port is None else f"{host}:{port}"
    userinfo = parts.netloc.rpartition("@")[0]
    if userinfo:
        netloc = f"{userinfo}@{netloc}"

    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))
