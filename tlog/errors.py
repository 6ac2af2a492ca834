"""Error types raised while loading blog content.

Per-post problems (``UnreadableSource``, ``MalformedMetadata``, ``InvalidDate``)
are skipped and logged by the loader. Structural problems
(``DirectoryUnavailable``, ``ValidationRejected``) abort the load pass.
"""


class ContentError(Exception):
    """Base class for content loading failures."""


class UnreadableSource(ContentError):
    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason}" if reason else f"Cannot read {self.path}")


class MalformedMetadata(ContentError):
    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Malformed metadata in {source}: {reason}")


class InvalidDate(ContentError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid date value: {value}")


class ValidationRejected(ContentError):
    def __init__(self, post_id: str, errors: list):
        self.post_id = post_id
        self.errors = errors
        fields = ", ".join(
            ".".join(str(part) for part in err.get("loc", ())) or "?" for err in errors
        )
        super().__init__(f"Post {post_id} failed validation ({fields})")


class DirectoryUnavailable(ContentError):
    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        super().__init__(
            f"Content directory unavailable: {self.path}"
            + (f" ({reason})" if reason else "")
        )
