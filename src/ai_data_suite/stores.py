"""In-memory entity stores and seed data loading."""

import secrets
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import yaml

from .models import Column, Interaction, Table

# Bundled fixture datasets
DEFAULT_SEED_PATH = Path(__file__).parent / "seed" / "tables.yaml"


class SeedDataError(Exception):
    """Raised when the seed file does not describe a list of tables."""
    pass


def generate_id() -> str:
    """Generate an opaque, process-unique identifier (64 random bits, hex)."""
    return secrets.token_hex(8)


class KeyedStore:
    """
    Insertion-ordered collection of entities keyed by their ``id``.

    Entities are stored by reference and mutated in place by handlers.
    """

    def __init__(self):
        self._items: Dict[str, Any] = {}

    def new_id(self) -> str:
        """Return an identifier not currently used in this store."""
        entity_id = generate_id()
        while entity_id in self._items:
            entity_id = generate_id()
        return entity_id

    def add(self, entity: Any) -> Any:
        self._items[entity.id] = entity
        return entity

    def get(self, entity_id: Optional[str]) -> Optional[Any]:
        if entity_id is None:
            return None
        return self._items.get(entity_id)

    def values(self) -> List[Any]:
        return list(self._items.values())

    def __contains__(self, entity_id: str) -> bool:
        return entity_id in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)


class TableStore:
    """Datasets keyed by their unique name."""

    def __init__(self, tables: Optional[List[Table]] = None):
        self._tables: Dict[str, Table] = {}
        for table in tables or []:
            self._tables[table.name] = table

    def get(self, name: Optional[str]) -> Optional[Table]:
        if name is None:
            return None
        return self._tables.get(name)

    def names(self) -> List[str]:
        return list(self._tables.keys())

    def __len__(self) -> int:
        return len(self._tables)


class EntityStores:
    """The stores one dispatch engine reads and writes."""

    def __init__(self, tables: Optional[List[Table]] = None):
        self.tables = TableStore(tables)
        self.dashboards = KeyedStore()
        self.contacts = KeyedStore()
        self.interactions = KeyedStore()
        self.followups = KeyedStore()

    @classmethod
    def seeded(cls, seed_path: Optional[str] = None) -> "EntityStores":
        """
        Create fresh stores with datasets loaded from a seed file.

        Args:
            seed_path: YAML seed file (default: bundled seed/tables.yaml)

        Returns:
            EntityStores with empty dashboard and CRM stores
        """
        return cls(load_seed_tables(seed_path or DEFAULT_SEED_PATH))

    def interactions_for(self, contact_id: str) -> List[Interaction]:
        return [i for i in self.interactions if i.contactId == contact_id]


def load_seed_tables(file_path) -> List[Table]:
    """
    Parse a YAML seed file into tables.

    Args:
        file_path: Path to the seed YAML document

    Returns:
        Tables in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        yaml.YAMLError: If YAML is invalid
        SeedDataError: If the document has no usable ``tables`` list
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"Seed file not found: {file_path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or not isinstance(data.get("tables"), list):
        raise SeedDataError(f"{file_path}: expected a top-level 'tables' list")

    tables = []
    for index, entry in enumerate(data["tables"]):
        if not isinstance(entry, dict) or not entry.get("name"):
            raise SeedDataError(f"{file_path}: table #{index} has no name")

        columns = [
            Column(name=str(c["name"]), type=str(c.get("type", "string")))
            for c in entry.get("columns") or []
        ]
        rows = [dict(row) for row in entry.get("data") or []]
        tables.append(Table(name=str(entry["name"]), columns=columns, data=rows))

    return tables
