from abc import ABC, abstractmethod


class FileStorage(ABC):
    @abstractmethod
    async def store(self, file_content: bytes, suggested_name: str) -> str:
        """Persist the bytes and return the storage path to keep on the record."""
        ...

    @abstractmethod
    async def retrieve(self, storage_path: str) -> bytes:
        """Return the stored bytes, raising FileNotFoundError if absent."""
        ...

    @abstractmethod
    async def delete(self, storage_path: str) -> None:
        ...

    @abstractmethod
    async def exists(self, storage_path: str) -> bool:
        ...
