# domain/remote_url.py
from __future__ import annotations

import re
from dataclasses import dataclass

from domain.exceptions import ValidationError

GITHUB_PREFIX = "https://github.com/"
GIT_SUFFIX = ".git"

# owner/repo, each non-empty, no further slashes or whitespace
_PATH_RE = re.compile(r"^[^/\s]+/[^/\s]+$")


def is_valid_remote_url(candidate: str) -> bool:
    if not candidate.startswith(GITHUB_PREFIX) or not candidate.endswith(GIT_SUFFIX):
        return False
    path = candidate[len(GITHUB_PREFIX):-len(GIT_SUFFIX)]
    return bool(_PATH_RE.match(path))


@dataclass(frozen=True)
class RemoteUrl:
    value: str

    def __post_init__(self) -> None:
        if not is_valid_remote_url(self.value):
            raise ValidationError(
                f"Invalid repository URL: {self.value!r} "
                f"(expected {GITHUB_PREFIX}<owner>/<repo>{GIT_SUFFIX})"
            )

    @property
    def owner(self) -> str:
        return self.value[len(GITHUB_PREFIX):].split("/", 1)[0]

    @property
    def repo(self) -> str:
        return self.value[len(GITHUB_PREFIX):-len(GIT_SUFFIX)].split("/", 1)[1]
