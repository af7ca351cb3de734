from urllib.parse import urlsplit


def origin_of(url: str) -> str:
    """Return `scheme://netloc` for an absolute URL."""
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"Not an absolute URL: {url!r}")
    return f"{parts.scheme}://{parts.netloc}"


def is_absolute(href: str) -> bool:
    return bool(urlsplit(href).scheme)


def resolve(href: str, base_url: str) -> str:
    """Rewrite a nav link into an absolute URL under `base_url`.

    `/x` is joined to the origin of `base_url`; any other relative link is
    joined to `base_url` itself, so page-relative links keep the base path.
    Absolute links (any scheme) come back unchanged, so resolving twice is
    the same as resolving once.
    """
    if not href or is_absolute(href):
        return href
    base = base_url.rstrip("/")
    if href.startswith("//"):
        return f"{urlsplit(base).scheme}:{href}"
    if href.startswith("/"):
        return origin_of(base) + href
    return f"{base}/{href}"
