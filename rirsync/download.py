"""Fetching of files over HTTP into a directory."""

from __future__ import annotations

import os
import shutil
import urllib.error
import urllib.request
import uuid


def _url_base_name(url: str) -> str:
    trimmed = url.rstrip("/")
    if not trimmed:
        return "/" if url else "."
    return trimmed.rsplit("/", 1)[-1]


def download_file(dir_path: str, url: str) -> str:
    """Download ``url`` into ``dir_path`` and return the path of the new file.

    The file is named after the last element of the URL. Raises ``OSError``
    when the request fails or the server does not answer 200.
    """
    try:
        response = urllib.request.urlopen(url)
    except urllib.error.HTTPError as err:
        err.close()
        raise OSError(f"unexpected status: {err.code} {err.reason}") from err
    except (urllib.error.URLError, OSError, ValueError) as err:
        raise OSError(f"error making request: {err}") from err

    with response:
        if response.status != 200:
            raise OSError(f"unexpected status: {response.status} {response.reason}")

        file_name = _url_base_name(url)
        if file_name in (".", "/"):
            file_name = f"index-{uuid.uuid4()}"
        file_path = os.path.join(dir_path, file_name)

        try:
            os.makedirs(dir_path, mode=0o755, exist_ok=True)
        except OSError as err:
            raise OSError(f"failed to create directory: {err}") from err

        try:
            with open(file_path, "wb") as out:
                shutil.copyfileobj(response, out)
        except OSError as err:
            raise OSError(f"error writing file: {err}") from err

    return file_path