import logging
import os
import threading
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from pydantic import ValidationError

from tlog.errors import (
    DirectoryUnavailable,
    InvalidDate,
    MalformedMetadata,
    UnreadableSource,
    ValidationRejected,
)
from tlog.repos.post_store import PostStore
from tlog.schemas.blog import PostData, PostRecord
from tlog.services.file_watcher import ChangeEvent, PollingFileWatcher
from tlog.services.metadata import parse_metadata

logger = logging.getLogger(__name__)

METADATA_EXT = ".toml"
BODY_EXT = ".md"


def validate_post_data(post_id: str, fields: dict) -> PostData:
    """Validate normalized metadata against the post schema."""
    try:
        return PostData.model_validate(fields)
    except ValidationError as e:
        raise ValidationRejected(post_id, e.errors()) from e


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableSource(path, str(e)) from e


class ContentLoader:
    """Load paired ``<id>.toml`` / ``<id>.md`` files into a PostStore.

    ``load()`` rebuilds the whole store from disk. ``handle_change()`` reloads
    a single post after an edit and never lets an error escape. Both take the
    same lock so there is at most one writer at a time.
    """

    def __init__(
        self,
        content_dir,
        store: PostStore,
        *,
        validate: Callable[[str, dict], PostData] = validate_post_data,
        root=None,
    ):
        self.content_dir = Path(content_dir).resolve()
        self.store = store
        self.validate = validate
        self.root = Path(root).resolve() if root else None
        self._write_lock = threading.Lock()
        self._watcher: Optional[PollingFileWatcher] = None

    def paths_for(self, post_id: str) -> tuple[Path, Path]:
        return (
            self.content_dir / f"{post_id}{METADATA_EXT}",
            self.content_dir / f"{post_id}{BODY_EXT}",
        )

    def load(self) -> int:
        """Clear the store and load every valid post pair.

        Returns the number of posts stored. Raises DirectoryUnavailable and
        ValidationRejected; per-post read and parse problems are skipped.
        """
        with self._write_lock:
            if not self.content_dir.is_dir():
                raise DirectoryUnavailable(self.content_dir, "not a directory")

            self.store.clear()
            loaded = 0
            for name in self._list_metadata_files():
                post_id = name[: -len(METADATA_EXT)]
                _, body_path = self.paths_for(post_id)
                try:
                    record = self._build_record(post_id)
                except UnreadableSource as e:
                    unreadable = Path(e.path)
                    if unreadable == body_path and not body_path.exists():
                        logger.warning(f"No matching {BODY_EXT} file for {name}, skipping")
                    else:
                        logger.warning(f"Cannot read {unreadable.name}: {e.reason}, skipping")
                    continue
                except MalformedMetadata as e:
                    logger.warning(f"{e}, skipping")
                    continue
                except InvalidDate as e:
                    logger.warning(f"{e} in {name}, skipping")
                    continue

                self.store.set(record)
                loaded += 1

            logger.info(f"Loaded {loaded} posts from {self.content_dir}")
            return loaded

    def reload(self, post_id: str) -> PostRecord:
        """Re-read one post and replace its record; raises on any failure."""
        with self._write_lock:
            record = self._build_record(post_id)
            self.store.set(record)
        logger.info(f"Reloaded {post_id}")
        return record

    def handle_change(self, changed_path) -> Optional[PostRecord]:
        changed = Path(changed_path).resolve()
        if changed.parent != self.content_dir:
            logger.debug(f"Ignoring change outside content dir: {changed}")
            return None
        if changed.suffix not in (METADATA_EXT, BODY_EXT):
            return None
        if changed.name.startswith("."):
            return None

        post_id = changed.stem
        try:
            return self.reload(post_id)
        except Exception as e:
            logger.error(f"Error reloading {post_id}: {e}")
            return None

    def watch(self, events: Iterable[ChangeEvent]) -> None:
        for event in events:
            self.handle_change(event.path)

    def start_watching(
        self, watcher: Optional[PollingFileWatcher] = None
    ) -> threading.Thread:
        """Consume file changes on a daemon thread until stop_watching()."""
        self._watcher = watcher or PollingFileWatcher(self.content_dir)
        events = self._watcher.subscribe()
        thread = threading.Thread(
            target=self.watch, args=(events,), daemon=True, name="ContentWatcher"
        )
        thread.start()
        logger.info("Content watcher started in background thread")
        return thread

    def stop_watching(self) -> None:
        if self._watcher is not None:
            self._watcher.stop()

    def _list_metadata_files(self) -> List[str]:
        try:
            names = sorted(os.listdir(self.content_dir))
        except OSError as e:
            raise DirectoryUnavailable(self.content_dir, str(e)) from e
        # dotfiles such as .config.toml are site configuration, not posts
        return [n for n in names if n.endswith(METADATA_EXT) and not n.startswith(".")]

    def _build_record(self, post_id: str) -> PostRecord:
        metadata_path, body_path = self.paths_for(post_id)
        fields = parse_metadata(_read_text(metadata_path), source=metadata_path.name)
        body = _read_text(body_path)
        data = self.validate(post_id, fields)
        return PostRecord(
            id=post_id,
            data=data,
            body=body,
            file_path=os.path.relpath(body_path, self.root or os.getcwd()),
            deferred_render=True,
        )
