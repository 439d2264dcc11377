import os

from .file_storage import FileStorage


def create_store(kind: str = None, state_dir: str = None, db_url: str = None):
    """Build the configured state store.

    kind defaults to the KELIME_STORAGE environment variable, then 'file'.
    """
    kind = kind or os.environ.get('KELIME_STORAGE', 'file')
    if kind == 'file':
        return FileStorage(state_dir=state_dir)
    if kind == 'postgres':
        # psycopg2 is only needed for this backend
        from .postgres_storage import PostgresStorage
        return PostgresStorage(db_url=db_url)
    raise ValueError(f"Unknown storage type: {kind}")


__all__ = ['FileStorage', 'create_store']
