"""Asset URL resolution under the deployment base path."""
import re

_SLASH_RUN = re.compile(r"/{2,}")
_ABSOLUTE_URL = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def normalize_base_path(base_path: str) -> str:
    """Return the base path as ``/prefix`` or ``""`` when there is no prefix."""
    base = _SLASH_RUN.sub("/", (base_path or "").strip()).rstrip("/")
    if not base:
        return ""
    if not base.startswith("/"):
        base = "/" + base
    return base


def resolve(base_path: str, asset_path: str) -> str:
    """Map a relative asset path to a root-relative URL under ``base_path``.

    Paths that already carry the prefix are returned unchanged, so resolving
    a resolved URL again is a no-op. URLs with a scheme (``https://...``)
    pass through untouched.
    """
    raw = asset_path.strip()
    if _ABSOLUTE_URL.match(raw):
        return raw

    base = normalize_base_path(base_path)
    path = _SLASH_RUN.sub("/", raw).lstrip("/")
    rooted = "/" + path

    if base and raw.startswith("/") and (rooted == base or rooted.startswith(base + "/")):
        return rooted

    return f"{base}/{path}"


class AssetUrlResolver:
    """Resolves asset paths against a base path fixed at construction."""

    def __init__(self, base_path: str = ""):
        self.base_path = normalize_base_path(base_path)

    def resolve(self, asset_path: str) -> str:
        return resolve(self.base_path, asset_path)

    def __call__(self, asset_path: str) -> str:
        return self.resolve(asset_path)

    def __repr__(self) -> str:
        return f"AssetUrlResolver(base_path={self.base_path!r})"
