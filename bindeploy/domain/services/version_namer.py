"""
Version Namer

Architectural Intent:
- Combines binary name, build timestamp, commit and digest into the
  remote version name
- The clock is the only non-deterministic input and is injectable
"""

import time
from typing import Callable
from bindeploy.domain.value_objects.commit_id import CommitIdentifier
from bindeploy.domain.value_objects.content_digest import ContentDigest
from bindeploy.domain.value_objects.version_name import RemoteVersionName


class VersionNamer:
    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock

    def name(
        self,
        binary_name: str,
        commit: CommitIdentifier | str,
        digest: ContentDigest | str,
    ) -> RemoteVersionName:
        if isinstance(commit, str):
            commit = CommitIdentifier(commit)
        if isinstance(digest, str):
            digest = ContentDigest(digest)
        return RemoteVersionName(
            binary_name=binary_name,
            timestamp=int(self.clock()),
            commit=commit,
            digest=digest,
        )
