"""Thread-safe registry of stylesheet assets used by HTML components."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
import threading
from typing import Iterable

from badges.errors import UnknownStyleError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleAsset:
    handle: str
    path: Path
    dependencies: tuple[str, ...] = field(default_factory=tuple)


class StyleRegistry:
    """Tracks registered and enqueued stylesheets.

    Components call :meth:`require_style` on every render; only the first
    call for a handle does any work. Everything else can be driven directly
    through :meth:`register_style` and :meth:`enqueue_style`.
    """

    def __init__(self):
        self._styles: dict[str, StyleAsset] = {}
        self._enqueued: list[str] = []
        self._required: set[str] = set()
        self._lock = threading.RLock()

    @staticmethod
    def _resolve(source: str | Path, relative_path: str) -> Path:
        """Resolve *relative_path* against the directory containing *source*."""
        base = Path(source)
        if not base.is_dir():
            base = base.parent
        return (base / relative_path).resolve()

    def register_style(
        self,
        handle: str,
        source: str | Path,
        relative_path: str,
        dependencies: Iterable[str] = (),
    ) -> StyleAsset:
        """Register a stylesheet under *handle*.

        Registering an existing handle again is a no-op that returns the
        asset registered first.
        """
        with self._lock:
            existing = self._styles.get(handle)
            if existing is not None:
                logger.debug("Stylesheet %s already registered", handle)
                return existing

            asset = StyleAsset(
                handle=handle,
                path=self._resolve(source, relative_path),
                dependencies=tuple(dependencies),
            )
            self._styles[handle] = asset
            logger.info("Registered stylesheet %s (%s)", handle, asset.path)
            return asset

    def enqueue_style(self, handle: str) -> None:
        """Mark a registered stylesheet for output."""
        with self._lock:
            if handle not in self._styles:
                raise UnknownStyleError(handle)
            if handle not in self._enqueued:
                self._enqueued.append(handle)

    def require_style(
        self,
        handle: str,
        source: str | Path,
        relative_path: str,
        dependencies: Iterable[str] = (),
    ) -> bool:
        """Register and enqueue *handle* the first time it is required.

        Returns True when this call did the registration, False otherwise.
        Later calls skip the lock entirely once the handle is known.
        """
        if handle in self._required:
            return False
        with self._lock:
            if handle in self._required:
                return False
            self.register_style(handle, source, relative_path, dependencies)
            self.enqueue_style(handle)
            self._required.add(handle)
            return True

    def is_registered(self, handle: str) -> bool:
        return handle in self._styles

    def is_enqueued(self, handle: str) -> bool:
        return handle in self._enqueued

    def get(self, handle: str) -> StyleAsset:
        try:
            return self._styles[handle]
        except KeyError:
            raise UnknownStyleError(handle) from None

    def enqueued(self) -> list[str]:
        """Return enqueued handles with their registered dependencies first."""
        with self._lock:
            ordered: list[str] = []
            visiting: set[str] = set()

            def visit(handle: str) -> None:
                if handle in ordered or handle in visiting:
                    return
                asset = self._styles.get(handle)
                if asset is None:
                    logger.debug("Skipping unregistered stylesheet dependency %s", handle)
                    return
                visiting.add(handle)
                for dep in asset.dependencies:
                    visit(dep)
                visiting.discard(handle)
                ordered.append(handle)

            for handle in self._enqueued:
                visit(handle)
            return ordered

    def missing_dependencies(self) -> list[str]:
        """Return dependencies of enqueued styles that were never registered."""
        with self._lock:
            missing: list[str] = []
            for handle in self.enqueued():
                for dep in self._styles[handle].dependencies:
                    if dep not in self._styles and dep not in missing:
                        missing.append(dep)
            return missing

    def render_css(self) -> str:
        """Concatenate the stylesheet text of every enqueued asset."""
        chunks = []
        for handle in self.enqueued():
            asset = self._styles[handle]
            chunks.append(f"/* {handle} */\n{asset.path.read_text(encoding='utf-8')}")
        return "\n".join(chunks)

    def reset(self) -> None:
        """Forget every registered and enqueued stylesheet."""
        with self._lock:
            self._styles.clear()
            self._enqueued.clear()
            self._required.clear()


_default_registry = StyleRegistry()


def default_registry() -> StyleRegistry:
    """Return the process-wide registry shared by all components."""
    return _default_registry
