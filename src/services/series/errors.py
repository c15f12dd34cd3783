"""Series errors."""


class FetchError(Exception):
    """The series source could not be read or returned an unusable body."""

    def __init__(self, url: str, reason: str, status_code: int | None = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        detail = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"Failed to fetch series from {url}{detail}: {reason}")


class MalformedPointError(ValueError):
    """A raw point whose value cannot be coerced to a finite number."""

    def __init__(self, raw: object, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Malformed point {raw!r}: {reason}")
