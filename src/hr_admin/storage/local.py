import asyncio
import re
import time
import uuid
from pathlib import Path

from hr_admin.storage.base import FileStorage

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def safe_filename(suggested_name: str) -> str:
    name = _UNSAFE_CHARS.sub("_", Path(suggested_name).name).strip("._")
    return name or "upload"


class LocalFileStorage(FileStorage):
    """Stores uploads under ``base_dir/<subdir>/<epoch-ms>-<random>-<name>``."""

    def __init__(self, base_dir: str, subdir: str = "cv") -> None:
        self.base_dir = Path(base_dir).resolve()
        self.subdir = subdir
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _resolve(self, storage_path: str) -> Path:
        abs_path = (self.base_dir / storage_path).resolve()
        if not abs_path.is_relative_to(self.base_dir):
            raise FileNotFoundError(f"File not found: {storage_path}")
        return abs_path

    async def store(self, file_content: bytes, suggested_name: str) -> str:
        target_dir = self.base_dir / self.subdir
        await asyncio.to_thread(target_dir.mkdir, parents=True, exist_ok=True)
        stamp = f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"
        filename = f"{stamp}-{safe_filename(suggested_name)}"
        await asyncio.to_thread((target_dir / filename).write_bytes, file_content)
        return str(Path(self.subdir) / filename) if self.subdir else filename

    async def retrieve(self, storage_path: str) -> bytes:
        abs_path = self._resolve(storage_path)
        if not await asyncio.to_thread(abs_path.is_file):
            raise FileNotFoundError(f"File not found: {storage_path}")
        return await asyncio.to_thread(abs_path.read_bytes)

    async def delete(self, storage_path: str) -> None:
        abs_path = self._resolve(storage_path)
        if await asyncio.to_thread(abs_path.exists):
            await asyncio.to_thread(abs_path.unlink)

    async def exists(self, storage_path: str) -> bool:
        try:
            abs_path = self._resolve(storage_path)
        except FileNotFoundError:
            return False
        return await asyncio.to_thread(abs_path.is_file)
