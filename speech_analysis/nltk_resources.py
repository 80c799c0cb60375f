# Speech Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""NLTK data helpers.

Stop words and the opinion lexicon are NLTK corpora that are not part of the
`nltk` wheel. They are fetched on first use into the default NLTK data
directory (or `NLTK_DATA`, if set).
"""

import nltk

from speech_analysis.config import ConfigError


def ensure_nltk_resource(resource_path: str, name: str) -> None:
    """Make sure an NLTK resource is available, downloading it if needed.

    Args:
        resource_path:
            Lookup path as used by `nltk.data.find`, e.g. `corpora/stopwords`.
        name:
            Package name for `nltk.download`, e.g. `stopwords`.

    Raises:
        ConfigError:
            If the resource is missing and cannot be downloaded.
    """

    try:
        nltk.data.find(resource_path)
        return
    except LookupError:
        pass

    print(f"Downloading NLTK resource: {name}")
    if not nltk.download(name, quiet=True):
        raise ConfigError(f"NLTK resource '{name}' is not installed and could not be downloaded")
