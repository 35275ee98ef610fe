import io
import sys
import tarfile
from pathlib import Path

import pytest
import requests

# Ensure the repo root is on sys.path so tests can import the local package.
ROOT = str(Path(__file__).resolve().parents[1])
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture(autouse=True)
def _default_template_source(monkeypatch: pytest.MonkeyPatch) -> None:
    # Tests build archive names from these; a developer's shell overrides must not leak in.
    for name in (
        "CREATE_ETH_APP_GITHUB_HOST",
        "CREATE_ETH_APP_TEMPLATE_REPO",
        "CREATE_ETH_APP_TEMPLATE_BRANCH",
        "CREATE_ETH_APP_HTTP_TIMEOUT_S",
    ):
        monkeypatch.delenv(name, raising=False)


ARCHIVE_ROOT = "create-eth-app-refactor-templating-system"


class _Resp:
    def __init__(self, status_code: int, body: bytes = b""):
        self.status_code = status_code
        self.raw = io.BytesIO(body)

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.raw.close()
        return False


class _Sess:
    """Records every call; unknown URLs answer 404."""

    def __init__(self, *, heads=None, archives=None, redirects=None):
        self.heads = dict(heads or {})
        self.redirects = dict(redirects or {})
        self.archives = dict(archives or {})
        self.calls = []

    def head(self, url, allow_redirects=False, timeout=None):
        self.calls.append(("HEAD", url, timeout))
        while url in self.redirects:
            if not allow_redirects:
                return _Resp(301)
            url = self.redirects[url]
        return _Resp(self.heads.get(url, 404))

    def get(self, url, stream=False, timeout=None):
        self.calls.append(("GET", url, timeout))
        if url not in self.archives:
            return _Resp(404)
        return _Resp(200, self.archives[url])


def _build_tarball(files, *, root=ARCHIVE_ROOT) -> bytes:
    """Build a GitHub-style tar.gz: every path lives under `root/`, with directory entries."""
    buf = io.BytesIO()
    dirs_seen = set()
    with tarfile.open(fileobj=buf, mode="w:gz") as tf:
        for rel, content in files.items():
            full = f"{root}/{rel}"
            parts = full.split("/")
            for i in range(1, len(parts)):
                d = "/".join(parts[:i])
                if d in dirs_seen:
                    continue
                dirs_seen.add(d)
                info = tarfile.TarInfo(d)
                info.type = tarfile.DIRTYPE
                info.mode = 0o755
                tf.addfile(info)
            data = content.encode("utf-8") if isinstance(content, str) else content
            info = tarfile.TarInfo(full)
            info.size = len(data)
            info.mode = 0o644
            tf.addfile(info, io.BytesIO(data))
    return buf.getvalue()


@pytest.fixture
def make_session():
    return _Sess


@pytest.fixture
def make_tarball():
    return _build_tarball
