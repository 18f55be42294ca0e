from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from ev_analytics.core.dataset import Dataset
from ev_analytics.core.dataset_loader import load_dataset
from ev_analytics.core.exceptions import DatasetLoadError

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class DatasetHandle:
    """
    One-shot load lifecycle: pending -> ready | failed.

    A failed load is terminal for the session; the error message is kept
    for display and nothing is retried.
    """
    source: str
    status: LoadStatus = LoadStatus.PENDING
    _dataset: Optional[Dataset] = None
    error: Optional[str] = None

    def is_materialised(self) -> bool:
        return self._dataset is not None

    @property
    def dataset(self) -> Dataset:
        if self._dataset is None:
            raise RuntimeError(f"Dataset is not available (status: {self.status.value})")
        return self._dataset

    @classmethod
    def load(cls, source: str | Path, name: str | None = None) -> DatasetHandle:
        try:
            ds = load_dataset(source, name=name)
        except DatasetLoadError as e:
            logger.error(
                "Dataset load failed",
                extra={"source": str(source), "error": str(e), "error_type": type(e).__name__},
            )
            return cls(source=str(source), status=LoadStatus.FAILED, error=str(e))
        return cls(source=str(source), status=LoadStatus.READY, _dataset=ds)
