import aiofiles
from typing import Optional
from pathlib import Path


async def read_file(file_path: Path, mode: str = "r", encodings=None) -> Optional[str]:
    if "b" in mode: # binary mode doesnt take encoding
        async with aiofiles.open(file_path, mode) as f:
            return await f.read()
    if encodings is None:
        encodings = ['utf-8', 'latin-1', 'cp1252', 'iso-8859-1']

    for encoding in encodings:
        try:
            async with aiofiles.open(file_path, mode, encoding=encoding) as f:
                return await f.read()
        except UnicodeDecodeError:
            continue
    return None


async def write_file(file_path: Path, content: str, encoding: str = "utf-8") -> None:
    async with aiofiles.open(file_path, "w", encoding=encoding) as f:
        await f.write(content)
