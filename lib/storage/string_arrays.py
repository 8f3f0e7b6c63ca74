import logging
from typing import List, Optional
from datetime import datetime, UTC

from pymongo import MongoClient

from lib.txt_span.errors import ResourceNotFound
from lib.txt_span.protocols import DEFAULT_LOCALE


class StringArraysStorage:
    """Localized string arrays used as span builder segments."""

    indexes = ["array_id", "locale"]

    def __init__(self, db: MongoClient) -> None:
        self._db: MongoClient = db
        self._log = logging.getLogger("string_arrays")

    def prepare(self) -> None:
        for index in self.indexes:
            try:
                self._db.string_arrays.create_index(index)
            except Exception as e:
                self._log.warning(
                    "Can't create index %s. May be already exists. Info: %s", index, e
                )

    def save(self, array_id: str, items: List[str], locale: str = DEFAULT_LOCALE) -> dict:
        """Create or replace the array for the given locale"""
        document = {
            "array_id": array_id,
            "locale": locale,
            "items": list(items),
            "updated_at": datetime.now(UTC),
        }
        self._db.string_arrays.update_one(
            {"array_id": array_id, "locale": locale},
            {"$set": document},
            upsert=True,
        )
        return document

    def get(self, array_id: str, locale: str = DEFAULT_LOCALE) -> Optional[dict]:
        """Get the array document, falling back to the default locale"""
        document = self._db.string_arrays.find_one({"array_id": array_id, "locale": locale})
        if document is None and locale != DEFAULT_LOCALE:
            self._log.debug("No %s array for locale %s, using default", array_id, locale)
            document = self._db.string_arrays.find_one(
                {"array_id": array_id, "locale": DEFAULT_LOCALE}
            )
        return document

    def get_text_array(self, array_id: str, locale: str = DEFAULT_LOCALE) -> List[str]:
        document = self.get(array_id, locale)
        if document is None:
            raise ResourceNotFound(array_id, f"locale {locale}")
        return list(document["items"])

    def delete(self, array_id: str, locale: str = DEFAULT_LOCALE) -> bool:
        result = self._db.string_arrays.delete_one({"array_id": array_id, "locale": locale})
        return result.deleted_count > 0
