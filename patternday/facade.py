"""Facade pattern: one data store that keeps a database and a cache in step."""

from dataclasses import dataclass, field


class Database:
    def create(self, item_id: int) -> None:
        print(f"Create id is {item_id}'s data to DB")

    def update(self, item_id: int) -> None:
        print(f"Update id is {item_id}'s data from DB")

    def delete(self, item_id: int) -> None:
        print(f"Delete id is {item_id}'s data from DB")


class Cache:
    def create(self, item_id: int) -> None:
        print(f"Create id is {item_id}'s data to Cache")

    def update(self, item_id: int) -> None:
        print(f"Update id is {item_id}'s data from Cache")

    def delete(self, item_id: int) -> None:
        print(f"Delete id is {item_id}'s data from Cache")


@dataclass
class DataStore:
    """Applies every operation to the database and then to the cache."""

    db: Database = field(default_factory=Database)
    cache: Cache = field(default_factory=Cache)

    def create(self, item_id: int) -> None:
        self.db.create(item_id)
        self.cache.create(item_id)

    def update(self, item_id: int) -> None:
        self.db.update(item_id)
        self.cache.update(item_id)

    def delete(self, item_id: int) -> None:
        self.db.delete(item_id)
        self.cache.delete(item_id)