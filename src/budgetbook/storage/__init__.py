"""Local persistence backends for the budgetbook snapshot."""

from budgetbook.storage.blob_store import (
    BlobStore,
    BlobStoreError,
    JsonFileBlobStore,
    MemoryBlobStore,
    SqliteBlobStore,
)

__all__ = [
    "BlobStore",
    "BlobStoreError",
    "JsonFileBlobStore",
    "MemoryBlobStore",
    "SqliteBlobStore",
]
