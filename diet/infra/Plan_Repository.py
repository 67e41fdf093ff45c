"""Plan store: generated plans kept in a JSON file keyed by an opaque plan id.

Each key is written once and read many times. Writes go through a temp file
and are serialised with a process-local lock.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Optional, Union
from uuid import uuid4

from diet.domain.WeekRecord import FullPlan, plan_from_dicts, plan_to_dicts
from diet.infra.paths import PLANS_FILE
from diet.utilities.config import PLAN_ID_LENGTH

logger = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 5


class DuplicatePlanId(ValueError):
    pass


def new_plan_id(length: int = PLAN_ID_LENGTH) -> str:
    return uuid4().hex[:length]


class PlanRepository:
    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path) if path is not None else PLANS_FILE
        self._lock = Lock()

    def _load_store(self, strict: bool = False) -> Dict[str, Any]:
        """Read the whole store. A corrupt file reads as empty unless ``strict``."""
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f) or {}
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in plan store {self.path}: {e}")
            if strict:
                raise
            return {}

    def _atomic_write(self, store: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".plans_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(store, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def put(self, key: str, plan: FullPlan) -> None:
        """Store a plan under ``key``. Keys are write-once.

        Raises json.JSONDecodeError, leaving the file untouched, if the
        existing store cannot be read.
        """
        with self._lock:
            store = self._load_store(strict=True)
            if key in store:
                raise DuplicatePlanId(f"Plan id already exists: {key}")
            store[key] = plan_to_dicts(plan)
            self._atomic_write(store)
        logger.info("Stored plan %s (%s weeks)", key, len(plan))

    def get(self, key: str) -> Optional[FullPlan]:
        """Return the plan stored under ``key``, or None if there is none."""
        with self._lock:
            store = self._load_store()
        data = store.get(key)
        if data is None:
            return None
        return plan_from_dicts(data)

    def create(self, plan: FullPlan) -> str:
        """Store a plan under a freshly issued id and return the id."""
        for _ in range(MAX_ID_ATTEMPTS):
            plan_id = new_plan_id()
            try:
                self.put(plan_id, plan)
                return plan_id
            except DuplicatePlanId:
                logger.warning("Plan id collision on %s, retrying", plan_id)
        raise RuntimeError("Could not issue a unique plan id")
