"""
Wordlist auditing for the Password Analyzer.

Scores every entry of a newline-separated wordlist and reports how the
list is distributed across strength labels. Only aggregates leave this
module; entries are never logged or returned.
"""

import os
from collections import Counter
from typing import Dict, List, NamedTuple, Optional

from tqdm import tqdm

from .crack_time import estimate_crack_time
from .strength import COMMON_PASSWORD_FEEDBACK, STRENGTH_LABELS, calculate_password_strength
from password_analyzer.utils.exceptions import WordlistNotFoundError
from password_analyzer.utils.logger import get_logger


class AuditSummary(NamedTuple):
    """Aggregate results of a wordlist audit"""

    total: int
    common: int
    labels: Dict[str, int]
    mean_entropy: float
    typical_crack_time: Optional[str]

    def to_dict(self) -> Dict[str, object]:
        return self._asdict()


class WordlistAuditor:
    """Scores a wordlist and summarizes its strength distribution"""

    def __init__(self, wordlist_path: str, logger=None, show_progress: bool = True):
        """Initialize with the path to a wordlist

        Args:
            wordlist_path: Path to a newline-separated wordlist
            logger: Optional logger instance
            show_progress: Whether to draw a progress bar while scoring
        """
        if not os.path.exists(wordlist_path):
            raise WordlistNotFoundError(f"Wordlist file not found: {wordlist_path}")

        self.wordlist_path = wordlist_path
        self.logger = logger or get_logger(__name__)
        self.show_progress = show_progress

    def load(self) -> List[str]:
        """Read the wordlist, skipping blank lines"""
        with open(self.wordlist_path, 'r', encoding='utf-8', errors='ignore') as f:
            return [line.rstrip("\r\n") for line in f if line.strip()]

    def run(self) -> AuditSummary:
        """Score every entry and build the summary"""
        words = self.load()
        self.logger.info(f"Auditing {len(words):,} entries from {self.wordlist_path}")

        labels = {label: 0 for label in STRENGTH_LABELS}
        crack_times = Counter()
        common = 0
        entropy_total = 0.0

        progress_bar = tqdm(total=len(words), unit="pw", disable=not self.show_progress)
        try:
            for word in words:
                result = calculate_password_strength(word)
                if result.feedback == (COMMON_PASSWORD_FEEDBACK,):
                    common += 1
                labels[result.label] += 1
                crack_times[estimate_crack_time(result.entropy)] += 1
                entropy_total += result.entropy
                progress_bar.update(1)
        finally:
            progress_bar.close()

        total = len(words)
        summary = AuditSummary(
            total=total,
            common=common,
            labels=labels,
            mean_entropy=entropy_total / total if total else 0.0,
            typical_crack_time=crack_times.most_common(1)[0][0] if crack_times else None,
        )
        self.logger.info(
            f"Audit finished: {total:,} entries, {common:,} on the common password list"
        )
        return summary
