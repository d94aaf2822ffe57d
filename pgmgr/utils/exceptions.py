from __future__ import annotations

import errno


class CommandError(Exception):
    """Failure raised by a command; ``kind`` lets callers branch without parsing text."""

    def __init__(self, kind: str, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


# errno -> error kind for filesystem failures
_ERRNO_KINDS = {
    errno.ENOENT: "not_found",
    errno.EACCES: "permission_denied",
    errno.EPERM: "permission_denied",
    errno.ENOTDIR: "not_a_directory",
    errno.EBUSY: "busy",
    errno.ETXTBSY: "busy",
    errno.EROFS: "read_only",
    errno.ELOOP: "too_deep",
}


def kind_for_os_error(exc: BaseException) -> str:
    if isinstance(exc, RecursionError):
        return "too_deep"
    if isinstance(exc, OSError):
        # winerror 32: file in use by another process
        if getattr(exc, "winerror", None) == 32:
            return "busy"
        return _ERRNO_KINDS.get(exc.errno, "other")
    return "other"


class RemoveDirError(CommandError):
    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(kind_for_os_error(cause), str(cause))


class LibraryError(CommandError):
    pass
