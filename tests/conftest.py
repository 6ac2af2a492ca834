import datetime
import textwrap
from pathlib import Path

import pytest

from tlog.repos.post_store import PostStore
from tlog.schemas.blog import PostData, PostRecord


def make_record(
    post_id: str,
    *,
    date=datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc),
    tags=None,
    draft=None,
    title=None,
    body: str = "body text",
) -> PostRecord:
    """Build a PostRecord without touching the file system."""
    return PostRecord(
        id=post_id,
        data=PostData(
            title=title or post_id.replace("-", " ").title(),
            date=date,
            tags=tags,
            draft=draft,
        ),
        body=body,
        file_path=f"{post_id}.md",
    )


def write_post(
    directory: Path,
    post_id: str,
    metadata: str = None,
    body: str = "Post body\n",
) -> None:
    """Write ``<post_id>.toml`` and, unless ``body`` is None, ``<post_id>.md``."""
    if metadata is None:
        metadata = f"""
        [metadata]
        title = "{post_id}"
        date = 2024-05-01
        """
    (directory / f"{post_id}.toml").write_text(
        textwrap.dedent(metadata).lstrip(), encoding="utf-8"
    )
    if body is not None:
        (directory / f"{post_id}.md").write_text(body, encoding="utf-8")


@pytest.fixture
def store():
    return PostStore()


@pytest.fixture
def content_dir(tmp_path):
    directory = tmp_path / "blog"
    directory.mkdir()
    return directory


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        list_posts_return=None,
        get_post_return=None,
        tags_return=None,
        search_return=None,
    ):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._tags_return = tags_return or []
        self._search_return = search_return or []
        self.tag_calls = []

    def list_posts(self):
        return self._list_posts_return

    def homepage_posts(self):
        return self._list_posts_return[:1]

    def get_post(self, post_id: str):
        return self._get_post_return

    def list_tags(self):
        return self._tags_return

    def posts_for_tag(self, tag: str):
        self.tag_calls.append(tag)
        return [p for p in self._list_posts_return if tag in p.get("tags", [])]

    def search_index(self):
        return self._search_return


class FakeWatcher:
    """
    Watcher stand-in that replays a fixed list of change events.
    """

    def __init__(self, events):
        self.events = list(events)
        self.stopped = False

    def subscribe(self):
        return iter(self.events)

    def stop(self):
        self.stopped = True
