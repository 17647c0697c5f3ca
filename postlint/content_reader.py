"""Reading of content artifacts from disk"""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from postlint.errors import ContentReadError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yml", ".yaml")
JSON_SUFFIXES = (".json",)


class ContentReader:
    """Composition class for content file operations"""

    @staticmethod
    def read_text(path: Path) -> str:
        """Read a file as UTF-8 text"""
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ContentReadError(path, f"not valid UTF-8 ({exc.reason})") from exc
        except OSError as exc:
            raise ContentReadError(path, exc.strerror or str(exc)) from exc

    def read_document(self, path: Path) -> dict[str, Any]:
        """Read a post artifact document into a mapping"""
        text = self.read_text(path)
        suffix = path.suffix.lower()
        logger.debug("Reading post artifact %s", path)

        if suffix in JSON_SUFFIXES:
            try:
                document = json.loads(text)
            except json.JSONDecodeError as exc:
                raise ContentReadError(path, f"invalid JSON: {exc.msg} (line {exc.lineno})") from exc
        elif suffix in YAML_SUFFIXES:
            try:
                document = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise ContentReadError(path, f"invalid YAML: {exc}") from exc
        else:
            raise ContentReadError(path, f"unsupported artifact type {suffix or '<none>'!r}")

        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ContentReadError(path, f"expected a mapping, got {type(document).__name__}")
        non_string_keys = [key for key in document if not isinstance(key, str)]
        if non_string_keys:
            raise ContentReadError(
                path, f"non-string key {non_string_keys[0]!r} (quote keys such as on, yes or 1)"
            )
        return document

    @staticmethod
    def _visible(path: Path, root: Path) -> bool:
        return not any(part.startswith(".") for part in path.relative_to(root).parts)

    def discover(
        self,
        root: Path,
        post_suffixes: Iterable[str],
        partial_glob: str,
        exclude: Iterable[Path] = (),
    ) -> tuple[list[Path], list[Path]]:
        """Find post artifacts and author partials below root.

        Returns:
            Sorted post paths and sorted partial paths. A file matching the
            partial glob is never treated as a post. Paths in exclude, such
            as the validator config file, are skipped.
        """
        if not root.exists():
            raise ContentReadError(root, "no such file or directory")
        if root.is_file():
            if root.match(partial_glob):
                return [], [root]
            return [root], []

        suffixes = {suffix.lower() for suffix in post_suffixes}
        excluded = {path.resolve() for path in exclude}
        partials = sorted(
            path
            for path in root.rglob(partial_glob)
            if path.is_file()
            and self._visible(path, root)
            and path.resolve() not in excluded
        )
        partial_set = set(partials)
        posts = sorted(
            path
            for path in root.rglob("*")
            if path.is_file()
            and path.suffix.lower() in suffixes
            and path not in partial_set
            and self._visible(path, root)
            and path.resolve() not in excluded
        )
        logger.debug("Discovered %d post(s) and %d partial(s) below %s", len(posts), len(partials), root)
        return posts, partials
