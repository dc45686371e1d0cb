import gdown
import os

from pathlib import Path
from typing import Optional, Union

PARQUET_URL = (
    "https://huggingface.co/datasets/hmcgovern/original-language-bibles-greek"
    "/resolve/main/data/train-00000-of-00001.parquet"
)
PARQUET_NAME = "tagnt.parquet"

def _is_parquet(p: Path) -> bool:
    # Header magic, 4-byte footer length, trailing magic
    if not p.exists() or p.stat().st_size < 12:
        return False
    with open(p, "rb") as f:
        head = f.read(4)
        f.seek(-4, 2)
        return head == b"PAR1" and f.read(4) == b"PAR1"

def ensure_parquet(
    source_dir: Optional[Union[str, Path]] = None,
    url: Optional[str] = None,
    force: bool = False,
) -> Path:
    """
    Ensures the TAGNT parquet file is cached locally.
    Downloads it from HuggingFace (via gdown) if missing/invalid or when forced.
    """
    source_dir = Path(source_dir or os.environ.get("TAGNT_SOURCE_DIR", "source"))
    url = url or os.environ.get("TAGNT_PARQUET_URL", PARQUET_URL)
    parquet_path = source_dir / PARQUET_NAME

    if not force and _is_parquet(parquet_path):
        print(f"[bootstrap_data] Using cached parquet: {parquet_path} ({parquet_path.stat().st_size} bytes)", flush=True)
        return parquet_path

    if parquet_path.exists():
        print(f"[bootstrap_data] Discarding cached file: {parquet_path} ({parquet_path.stat().st_size} bytes)", flush=True)
        parquet_path.unlink()

    source_dir.mkdir(parents=True, exist_ok=True)
    print(f"[bootstrap_data] Downloading TAGNT parquet from {url} ...", flush=True)

    tmp = parquet_path.with_suffix(parquet_path.suffix + ".tmp")
    if tmp.exists():
        tmp.unlink()

    gdown.download(url, str(tmp), quiet=False)
    tmp.replace(parquet_path)

    print(f"[bootstrap_data] Downloaded: {parquet_path} ({parquet_path.stat().st_size} bytes)", flush=True)

    if not _is_parquet(parquet_path):
        raise RuntimeError(
            f"Downloaded file is not a valid parquet file: {parquet_path}. "
            "Check TAGNT_PARQUET_URL."
        )

    return parquet_path
