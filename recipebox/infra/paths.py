from pathlib import Path

# Centralized paths for data files (single source of truth)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
STORE_FILE = DATA_DIR / 'store.json'

__all__ = ['DATA_DIR', 'STORE_FILE']
