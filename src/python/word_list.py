"""
Word corpus loading for hash benchmarks.

SPDX-License-Identifier: BSD-3-Clause
"""
from pathlib import Path
from typing import Any, Dict, List, Optional
import requests


class WordListDownloader:
    """Fetch SCOWL word lists from aspell.net, caching them on disk."""

    BASE_URL = "http://app.aspell.net/create"
    CACHE_NAME = "scowl_wordlist.txt"

    def __init__(self, cache_dir: Path, timeout: float = 60.0):
        self.cache_dir = cache_dir
        self.timeout = timeout

    def query_params(self, config: Dict[str, Any]) -> List[tuple]:
        """Expand a SCOWL configuration into ordered query parameters."""
        params = [('max_size', config['max_size'])]
        params += [('spelling', spell) for spell in config['spelling']]
        params += [('max_variant', config['max_variant']),
                   ('diacritic', config['diacritic'])]
        params += [('special', special) for special in config['special']]
        params += [('download', 'wordlist'),
                   ('encoding', config['encoding']),
                   ('format', config['format'])]
        return params

    def build_url(self, config: Dict[str, Any]) -> str:
        """Build the SCOWL download URL."""
        query = '&'.join(f"{k}={v}" for k, v in self.query_params(config))
        return f"{self.BASE_URL}?{query}"

    def fetch(self, config: Dict[str, Any], cache_file: Optional[Path] = None) -> Path:
        """Return a cached word list, downloading it first if needed."""
        cache_file = cache_file or self.cache_dir / self.CACHE_NAME
        if cache_file.exists():
            print(f"Using cached word list: {cache_file}")
            return cache_file

        url = self.build_url(config)
        print(f"Downloading SCOWL word list (size {config['max_size']}, "
              f"{', '.join(config['spelling'])})...")
        print(f"URL: {url}")

        response = requests.get(url, timeout=self.timeout)
        response.raise_for_status()

        cache_file.parent.mkdir(parents=True, exist_ok=True)
        cache_file.write_bytes(response.content)

        print(f"Word list cached to {cache_file}")
        return cache_file


class WordListParser:
    """Read word files, with or without a SCOWL header."""

    SEPARATOR = "---"

    def parse(self, file_path: Path) -> List[str]:
        """Load distinct words in file order, keeping their case."""
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f]

        if self.SEPARATOR in lines:
            start = lines.index(self.SEPARATOR) + 1
            print(f"Skipping SCOWL header ({start} lines)")
        else:
            start = 0

        words = list(dict.fromkeys(line for line in lines[start:] if line))
        print(f"Loaded {len(words):,} words from {file_path}")
        return words
