"""
Migration script to drop the legacy unique index on clients.clientId
"""
from has_status.core.logging_config import configure_logging
from has_status.db.session import get_engine, drop_legacy_indexes


def migrate_clients_table():
    print("--- Migrating Clients Table ---")
    configure_logging()
    drop_legacy_indexes(get_engine())
    print("\n✓ Migration completed")


if __name__ == "__main__":
    migrate_clients_table()
