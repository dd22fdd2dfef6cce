"""Async executors used by transports for blocking file operations."""

from __future__ import annotations

import abc
import asyncio
import os
from pathlib import Path


def _read(path: Path) -> bytes:
    return Path(path).read_bytes()


def _write(path: Path, contents: bytes) -> None:
    Path(path).write_bytes(contents)


class Executor(abc.ABC):
    """Runs filesystem work for async transports."""

    @abc.abstractmethod
    async def fs_read(self, path: str | os.PathLike[str]) -> bytes:
        """Read the whole file at ``path``."""

    @abc.abstractmethod
    async def fs_write(self, path: str | os.PathLike[str], contents: bytes) -> None:
        """Write ``contents`` to ``path``, replacing it."""


class ThreadExecutor(Executor):
    """Executor that runs file operations in a worker thread."""

    async def fs_read(self, path: str | os.PathLike[str]) -> bytes:
        return await asyncio.to_thread(_read, Path(path))

    async def fs_write(self, path: str | os.PathLike[str], contents: bytes) -> None:
        await asyncio.to_thread(_write, Path(path), bytes(contents))

    def __repr__(self) -> str:
        return "ThreadExecutor()"