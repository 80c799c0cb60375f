# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Hash utilities.

MD5 is used to fingerprint the analyzed transcript in the report and to derive
stable style names. It is not used for cryptographic security.
"""

from pathlib import Path
import hashlib


def _md5():
    # Some environments run in FIPS mode. Python's hashlib supports
    # `usedforsecurity=False` for legacy hashes on OpenSSL-backed builds.
    try:
        return hashlib.md5(usedforsecurity=False)  # type: ignore[call-arg]
    except TypeError:
        return hashlib.md5()


def md5_file(path: Path) -> str:
    """Compute the lowercase hex MD5 digest of a file."""

    hasher = _md5()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1024 * 1024), b""):
            hasher.update(chunk)

    return hasher.hexdigest()


def md5_text(text: str) -> str:
    """Compute an MD5 hash for a text string (UTF-8 encoded)."""

    hasher = _md5()
    hasher.update(text.encode("utf-8"))
    return hasher.hexdigest()
