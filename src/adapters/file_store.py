"""File persistence for `Zoo`.

Why it lives in adapters:
- File I/O is an infrastructure detail; the Core only knows `Zoo`, `Format`
  and the `ZooCodec` contract.
- This is the single place where `OSError` becomes `IOFailure`.

Design:
- Each call is one encode-then-write or read-then-decode step, with a scoped
  file handle released on every exit path.
- The format is resolved before any file is opened.
- No locking: concurrent writers and readers of the same path get whatever
  the filesystem guarantees.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from adapters.codecs import default_codecs
from core.config import AppSettings
from core.domain.errors import IOFailure, UnsupportedFormat, ZooStoreError
from core.domain.formats import Format
from core.domain.models import Zoo
from core.interfaces.codec import ZooCodec


logger = logging.getLogger(__name__)


class ZooFileStore:
    """Saves and loads zoos in any supported format."""

    def __init__(
        self,
        codecs: Mapping[Format, ZooCodec] | None = None,
        *,
        settings: AppSettings | None = None,
    ) -> None:
        self._codecs = dict(codecs) if codecs is not None else default_codecs(settings)

    def codec_for(self, fmt: Format | str) -> ZooCodec:
        """Resolve `fmt` to its codec, or raise `UnsupportedFormat`."""

        resolved = Format.coerce(fmt)
        codec = self._codecs.get(resolved)
        if codec is None:
            raise UnsupportedFormat(fmt)
        return codec

    def save(self, zoo: Zoo, path: Path | str, fmt: Format | str) -> Path:
        """Write `zoo` to `path`, creating or truncating the file."""

        codec = self.codec_for(fmt)
        path = Path(path)
        payload = codec.encode(zoo)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            handle = path.open("wb")
        except OSError as exc:
            logger.warning("Cannot open %s for writing: %s", path, exc)
            raise IOFailure("Cannot write zoo", path=path, cause=exc) from exc

        try:
            with handle:
                handle.write(payload)
        except OSError as exc:
            logger.warning("Write to %s failed: %s", path, exc)
            _discard_partial(path)
            raise IOFailure("Cannot write zoo", path=path, cause=exc) from exc

        logger.debug("Saved %s to %s as %s (%d bytes)", zoo, path, codec.format.value, len(payload))
        return path

    def load(self, path: Path | str, fmt: Format | str) -> Zoo:
        """Read `path` and decode it as `fmt`."""

        codec = self.codec_for(fmt)
        path = Path(path)

        try:
            with path.open("rb") as handle:
                data = handle.read()
        except OSError as exc:
            logger.warning("Cannot read %s: %s", path, exc)
            raise IOFailure("Cannot read zoo", path=path, cause=exc) from exc

        try:
            zoo = codec.decode(data)
        except ZooStoreError as exc:
            logger.warning("Cannot decode %s as %s: %s", path, codec.format.value, exc)
            raise

        logger.debug("Loaded %s from %s as %s", zoo, path, codec.format.value)
        return zoo

    def convert(
        self,
        source: Path | str,
        target: Path | str,
        *,
        source_format: Format | str,
        target_format: Format | str,
    ) -> Zoo:
        """Load `source` and save the same zoo to `target` in another format."""

        # Both formats are checked before either file is touched.
        self.codec_for(target_format)
        zoo = self.load(source, source_format)
        self.save(zoo, target, target_format)
        return zoo


def _discard_partial(path: Path) -> None:
    """Remove a half-written file so it cannot be read back as a different zoo."""

    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("Could not remove partial file %s: %s", path, exc)


_default_store: ZooFileStore | None = None


def _store() -> ZooFileStore:
    global _default_store
    if _default_store is None:
        _default_store = ZooFileStore()
    return _default_store


def save_zoo(zoo: Zoo, path: Path | str, fmt: Format | str) -> Path:
    """Module-level shortcut for `ZooFileStore().save`."""

    return _store().save(zoo, path, fmt)


def load_zoo(path: Path | str, fmt: Format | str) -> Zoo:
    """Module-level shortcut for `ZooFileStore().load`."""

    return _store().load(path, fmt)
