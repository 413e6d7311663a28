"""
Record storage for customers and predictions.

The scoring core never touches storage; PredictionService reads full
collections for statistics and writes new predictions.
"""

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Optional

from .records import Customer, PredictionRecord


class StorageError(Exception):
    """Raised when a store cannot read or write records."""


class PredictionStore(ABC):
    """Abstract base class for customer and prediction storage."""

    @abstractmethod
    def list_customers(self) -> list[Customer]:
        """All customers, newest first."""
        pass

    @abstractmethod
    def add_customer(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    def list_predictions(self) -> list[PredictionRecord]:
        """All predictions, newest first."""
        pass

    @abstractmethod
    def save_predictions(self, records: Iterable[PredictionRecord]) -> None:
        """Persist several predictions in one write."""
        pass

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        for customer in self.list_customers():
            if customer.id == customer_id:
                return customer
        return None

    def save_prediction(self, record: PredictionRecord) -> None:
        self.save_predictions([record])

    def predictions_for(self, customer_id: str) -> list[PredictionRecord]:
        """Predictions for one customer, newest first."""
        return [
            record for record in self.list_predictions()
            if record.customer_id == customer_id
        ]


def _newest_first(records, attribute: str) -> list:
    return sorted(records, key=lambda r: getattr(r, attribute), reverse=True)


class InMemoryStore(PredictionStore):
    """Keeps records in process memory."""

    def __init__(
        self,
        customers: Optional[Iterable[Customer]] = None,
        predictions: Optional[Iterable[PredictionRecord]] = None,
    ):
        self._customers = list(customers or [])
        self._predictions = list(predictions or [])

    def list_customers(self) -> list[Customer]:
        return _newest_first(self._customers, "created_at")

    def add_customer(self, customer: Customer) -> Customer:
        self._customers.append(customer)
        return customer

    def list_predictions(self) -> list[PredictionRecord]:
        return _newest_first(self._predictions, "prediction_date")

    def save_predictions(self, records: Iterable[PredictionRecord]) -> None:
        self._predictions.extend(records)


class JsonFileStore(PredictionStore):
    """
    Stores records as JSON arrays under a directory.

    Layout:
        <data_dir>/customers.json
        <data_dir>/predictions.json

    Every write rewrites the whole file through a temporary file that is
    renamed into place.
    """

    CUSTOMERS_FILE = "customers.json"
    PREDICTIONS_FILE = "predictions.json"

    def __init__(self, data_dir: Path | str):
        """
        Initialize store.

        Args:
            data_dir: Directory holding the JSON files (created if missing)
        """
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _read(self, filename: str) -> list[dict]:
        path = self.data_dir / filename
        if not path.exists():
            return []
        try:
            with open(path) as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    def _write(self, filename: str, rows: list[dict]) -> None:
        # Replace the file only once the new contents are fully written
        path = self.data_dir / filename
        fd, tmp_path = tempfile.mkstemp(
            dir=self.data_dir, prefix=f".{filename}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(rows, f, indent=2, default=str)
            os.replace(tmp_path, path)
        except (OSError, TypeError) as e:
            os.unlink(tmp_path)
            raise StorageError(f"Cannot write {path}: {e}") from e

    def list_customers(self) -> list[Customer]:
        rows = self._read(self.CUSTOMERS_FILE)
        return _newest_first([Customer.from_dict(row) for row in rows], "created_at")

    def add_customer(self, customer: Customer) -> Customer:
        rows = self._read(self.CUSTOMERS_FILE)
        rows.append(customer.to_dict())
        self._write(self.CUSTOMERS_FILE, rows)
        return customer

    def list_predictions(self) -> list[PredictionRecord]:
        rows = self._read(self.PREDICTIONS_FILE)
        return _newest_first(
            [PredictionRecord.from_dict(row) for row in rows], "prediction_date"
        )

    def save_predictions(self, records: Iterable[PredictionRecord]) -> None:
        rows = self._read(self.PREDICTIONS_FILE)
        rows.extend(record.to_dict() for record in records)
        self._write(self.PREDICTIONS_FILE, rows)
